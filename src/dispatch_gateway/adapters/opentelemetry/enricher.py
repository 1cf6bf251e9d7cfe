"""OpenTelemetry adapter – OtelLoggingEnricher."""
from __future__ import annotations

from typing import Any

from opentelemetry import trace


class OtelLoggingEnricher:
    """structlog processor that injects current span's trace/span IDs."""

    def __call__(self, logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        ctx = trace.get_current_span().get_span_context()
        if ctx.is_valid:
            event_dict.setdefault("trace_id", trace.format_trace_id(ctx.trace_id))
            event_dict.setdefault("span_id", trace.format_span_id(ctx.span_id))
        return event_dict


__all__ = ["OtelLoggingEnricher"]
