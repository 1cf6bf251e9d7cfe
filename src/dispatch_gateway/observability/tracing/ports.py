"""Observability – Tracer, Span, SpanKind, TracePropagator, TraceProvider ports."""
from __future__ import annotations

import abc
import contextlib
from enum import Enum
from typing import Any, AsyncIterator, Iterator, Protocol, runtime_checkable


class SpanKind(str, Enum):
    INTERNAL = "INTERNAL"
    SERVER = "SERVER"
    CLIENT = "CLIENT"
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"


class Span(abc.ABC):
    """Represents an active trace span."""

    @abc.abstractmethod
    def set_attribute(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def set_status_ok(self) -> None: ...

    @abc.abstractmethod
    def record_exception(self, exc: Exception) -> None: ...

    @abc.abstractmethod
    def end(self) -> None: ...


class Tracer(abc.ABC):
    """Port: create and manage spans.

    ``parent`` is an opaque context produced by
    :meth:`TracePropagator.extract`; ``None`` means "use the current one".
    """

    @abc.abstractmethod
    @contextlib.contextmanager
    def start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
        parent: Any = None,
    ) -> Iterator[Span]: ...

    @abc.abstractmethod
    @contextlib.asynccontextmanager
    async def start_async_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
        parent: Any = None,
    ) -> AsyncIterator[Span]: ...


class TracePropagator(Protocol):
    """Port: inject/extract trace context from transport headers."""

    def inject(self, headers: dict[str, str]) -> dict[str, str]: ...

    def extract(self, headers: dict[str, str]) -> Any: ...


@runtime_checkable
class TraceProvider(Protocol):
    """Port: the trace id of the request being processed.

    Raises :class:`~dispatch_gateway.kernel.errors.TraceContextMissingError`
    when called outside an active trace context.
    """

    def current_trace_id(self) -> str: ...


__all__ = ["Span", "SpanKind", "TracePropagator", "TraceProvider", "Tracer"]
