"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

import structlog
from fastapi.responses import JSONResponse

from dispatch_gateway.kernel.errors import ApplicationError, BaseError, InfrastructureError
from dispatch_gateway.observability.logging import get_logger

logger = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "...", "message": "...", "detail": {...}, "correlation_id": "..."}

    Mappings
    --------
    ``InfrastructureError`` → 503
    ``ApplicationError``    → 500
    """

    def __init__(self) -> None:
        self._map: list[tuple[type[Exception], int]] = [
            (InfrastructureError, 503),
            (ApplicationError, 500),
        ]

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status))

    @staticmethod
    def _make_handler(code: int) -> Callable[[Any, Any], Any]:
        async def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
            body = exc.to_dict() if isinstance(exc, BaseError) else {"code": "error", "message": str(exc)}
            body["correlation_id"] = structlog.contextvars.get_contextvars().get("correlation_id")
            logger.error("http.error", status=code, code=body["code"])
            return JSONResponse(status_code=code, content=body)

        return handler


__all__ = ["FastAPIExceptionMapper"]
