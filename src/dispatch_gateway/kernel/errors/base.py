"""Root error class for the dispatch-gateway error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Common ancestor of every error the gateway raises on purpose.

    Each error carries a stable ``code`` slug for clients and log queries,
    a human-readable ``message`` and an optional ``detail`` mapping.  When
    a lower-level exception is wrapped it is kept as ``cause`` and chained
    as ``__cause__``.

    Subclasses set ``default_code``; a ``code`` passed explicitly wins.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used for HTTP error bodies and log fields."""
        data = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["BaseError"]
