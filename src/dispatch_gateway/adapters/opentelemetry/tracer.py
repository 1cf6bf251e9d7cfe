"""OpenTelemetry adapter – OtelTracer and SDK bootstrap."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator, Iterator

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import StatusCode

from dispatch_gateway.observability.tracing import Span, SpanKind, Tracer

_KIND_MAP = {
    SpanKind.INTERNAL: trace.SpanKind.INTERNAL,
    SpanKind.SERVER: trace.SpanKind.SERVER,
    SpanKind.CLIENT: trace.SpanKind.CLIENT,
    SpanKind.PRODUCER: trace.SpanKind.PRODUCER,
    SpanKind.CONSUMER: trace.SpanKind.CONSUMER,
}


def configure_tracing(service_name: str) -> TracerProvider:
    """Install a global SDK tracer provider tagged with ``service.name``."""
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    return provider


class _OtelSpan(Span):
    def __init__(self, span: Any) -> None:
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def set_status_ok(self) -> None:
        self._span.set_status(StatusCode.OK)

    def record_exception(self, exc: Exception) -> None:
        self._span.record_exception(exc)
        self._span.set_status(StatusCode.ERROR, str(exc))

    def end(self) -> None:
        self._span.end()


class OtelTracer(Tracer):
    """OpenTelemetry tracer adapter.

    Spans are started as *current*, so anything running inside them (and
    any asyncio task spawned from there) sees them through
    :func:`opentelemetry.trace.get_current_span`.
    """

    def __init__(self, service_name: str = "service", tracer_provider: Any = None) -> None:
        self._tracer = trace.get_tracer(service_name, tracer_provider=tracer_provider)

    @contextlib.contextmanager
    def start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
        parent: Any = None,
    ) -> Iterator[Span]:
        with self._tracer.start_as_current_span(
            name,
            context=parent,
            kind=_KIND_MAP.get(kind, trace.SpanKind.INTERNAL),
            attributes=attributes,
        ) as span:
            yield _OtelSpan(span)

    @contextlib.asynccontextmanager
    async def start_async_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
        parent: Any = None,
    ) -> AsyncIterator[Span]:
        with self.start_span(name, kind, attributes, parent) as span:
            yield span


__all__ = ["OtelTracer", "configure_tracing"]
