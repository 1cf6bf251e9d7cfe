"""OpenTelemetry adapter – tracer, trace provider, propagator, logging enricher."""
from dispatch_gateway.adapters.opentelemetry.tracer import OtelTracer, configure_tracing
from dispatch_gateway.adapters.opentelemetry.provider import OtelTraceProvider
from dispatch_gateway.adapters.opentelemetry.propagator import OtelPropagator
from dispatch_gateway.adapters.opentelemetry.enricher import OtelLoggingEnricher

__all__ = [
    "OtelLoggingEnricher",
    "OtelPropagator",
    "OtelTraceProvider",
    "OtelTracer",
    "configure_tracing",
]
