"""OpenTelemetry adapter – OtelPropagator."""
from __future__ import annotations

from typing import Any

from opentelemetry import propagate

from dispatch_gateway.observability.tracing import TracePropagator


class OtelPropagator(TracePropagator):
    """Globally configured propagator (W3C TraceContext + Baggage by default)."""

    def inject(self, headers: dict[str, str]) -> dict[str, str]:
        propagate.inject(headers)
        return headers

    def extract(self, headers: dict[str, str]) -> Any:
        return propagate.extract(headers)


__all__ = ["OtelPropagator"]
