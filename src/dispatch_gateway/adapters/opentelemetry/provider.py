"""OpenTelemetry adapter – OtelTraceProvider."""
from __future__ import annotations

from opentelemetry import trace

from dispatch_gateway.kernel.errors import TraceContextMissingError


class OtelTraceProvider:
    """Reads the trace id of the span that is current for this context."""

    def current_trace_id(self) -> str:
        ctx = trace.get_current_span().get_span_context()
        if not ctx.is_valid:
            raise TraceContextMissingError()
        return trace.format_trace_id(ctx.trace_id)


__all__ = ["OtelTraceProvider"]
