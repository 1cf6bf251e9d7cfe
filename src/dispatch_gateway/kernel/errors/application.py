"""Application-layer errors: request handling and wiring concerns."""

from __future__ import annotations

from typing import Any

from dispatch_gateway.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class TraceContextMissingError(ApplicationError):
    """No active trace context when a trace id was requested."""

    default_code = "trace_context_missing"

    def __init__(
        self,
        message: str = "No active trace context for the current request",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = ["ApplicationError", "TraceContextMissingError"]
