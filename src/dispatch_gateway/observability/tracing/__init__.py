"""Observability – distributed tracing ports."""
from dispatch_gateway.observability.tracing.ports import (
    Span,
    SpanKind,
    TracePropagator,
    TraceProvider,
    Tracer,
)
from dispatch_gateway.observability.tracing.noop import NoopTracer

__all__ = ["NoopTracer", "Span", "SpanKind", "TracePropagator", "TraceProvider", "Tracer"]
