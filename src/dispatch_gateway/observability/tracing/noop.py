"""Observability – NoopTracer."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator, Iterator

from dispatch_gateway.observability.tracing.ports import Span, SpanKind, Tracer


class _DiscardingSpan(Span):
    """Accepts every call and records nothing."""

    def set_attribute(self, key: str, value: Any) -> None:
        return None

    def set_status_ok(self) -> None:
        return None

    def record_exception(self, exc: Exception) -> None:
        return None

    def end(self) -> None:
        return None


_SPAN = _DiscardingSpan()


class NoopTracer(Tracer):
    """Tracer used when a component is built without one.

    Spans cost nothing and exceptions pass through untouched, so
    :class:`~dispatch_gateway.application.dispatch.MessageDispatcher` can
    always wrap a publish in a span.
    """

    @contextlib.contextmanager
    def start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
        parent: Any = None,
    ) -> Iterator[Span]:
        yield _SPAN

    @contextlib.asynccontextmanager
    async def start_async_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
        parent: Any = None,
    ) -> AsyncIterator[Span]:
        yield _SPAN


__all__ = ["NoopTracer"]
