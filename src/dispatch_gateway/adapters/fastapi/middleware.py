"""FastAPI adapter – ASGI middleware implementations.

``RequestTracingMiddleware`` must wrap ``CorrelationIdMiddleware`` so that a
span is current when the correlation id is read.  With Starlette the last
``add_middleware`` call is the outermost layer.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from dispatch_gateway.observability.tracing import SpanKind, TracePropagator, TraceProvider, Tracer

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

CORRELATION_HEADER = "X-Correlation-Id"

_INTERNAL_ERROR = b"Internal Server Error"
_INTERNAL_ERROR_START = {
    "type": "http.response.start",
    "status": 500,
    "headers": [
        (b"content-type", b"text/plain; charset=utf-8"),
        (b"content-length", str(len(_INTERNAL_ERROR)).encode()),
    ],
}
_INTERNAL_ERROR_BODY = {"type": "http.response.body", "body": _INTERNAL_ERROR}


class CorrelationIdMiddleware:
    """Stamp every HTTP response with the trace id of its request.

    The id is read from the :class:`TraceProvider` *before* the downstream
    app runs and appended to the ``http.response.start`` message, whatever
    the status.  When the downstream app raises before responding, a plain
    500 carrying the header is sent from here and the exception re-raised.

    The id is also bound as ``correlation_id`` in structlog's context
    variables for the duration of the request; background tasks spawned by
    the handler inherit it.

    A missing trace context is not handled here: the provider's
    :class:`~dispatch_gateway.kernel.errors.TraceContextMissingError`
    propagates to the server's default error handling.
    """

    def __init__(
        self,
        app: "ASGIApp",
        trace_provider: TraceProvider,
        header_name: str = CORRELATION_HEADER,
    ) -> None:
        self.app = app
        self._trace_provider = trace_provider
        self._response_header = header_name.lower().encode()

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = self._trace_provider.current_trace_id()
        response_header = self._response_header
        encoded_id = correlation_id.encode()

        response_started = False

        async def send_with_header(message: Any) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.append((response_header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        with structlog.contextvars.bound_contextvars(correlation_id=correlation_id):
            try:
                await self.app(scope, receive, send_with_header)
            except Exception:
                # The server would answer on the raw send and drop the header.
                if not response_started:
                    await send_with_header(_INTERNAL_ERROR_START)
                    await send_with_header(_INTERNAL_ERROR_BODY)
                raise


class RequestTracingMiddleware:
    """Open a ``SERVER`` span per HTTP request.

    An inbound ``traceparent`` (or whatever the propagator understands)
    becomes the parent of the span; otherwise a new trace is started.
    """

    def __init__(
        self,
        app: "ASGIApp",
        tracer: Tracer,
        propagator: TracePropagator | None = None,
    ) -> None:
        self.app = app
        self._tracer = tracer
        self._propagator = propagator

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        parent = None
        if self._propagator is not None:
            headers = {
                k.decode("latin-1"): v.decode("latin-1") for k, v in scope.get("headers", [])
            }
            parent = self._propagator.extract(headers)

        method = scope.get("method", "GET")
        path = scope.get("path", "")
        status_code: list[int] = [200]

        async def send_capturing(message: Any) -> None:
            if message["type"] == "http.response.start":
                status_code[0] = message.get("status", 200)
            await send(message)

        async with self._tracer.start_async_span(
            f"{method} {path}",
            SpanKind.SERVER,
            {"http.request.method": method, "url.path": path},
            parent=parent,
        ) as span:
            await self.app(scope, receive, send_capturing)
            span.set_attribute("http.response.status_code", status_code[0])


__all__ = ["CORRELATION_HEADER", "CorrelationIdMiddleware", "RequestTracingMiddleware"]
