"""Infrastructure errors: broker and serialization failures."""

from __future__ import annotations

from typing import Any

from dispatch_gateway.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """An external system (broker, network, codec) failed us.

    Mapped to HTTP 503 when raised inside a request.
    """

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A payload could not be converted to or from its wire form."""

    default_code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
        if payload_type is not None:
            self.detail.setdefault("payload_type", payload_type)


__all__ = ["InfrastructureError", "SerializationError"]
