"""Entry point: ``python -m dispatch_gateway``."""
from __future__ import annotations

import uvicorn

from dispatch_gateway.adapters.kafka import KafkaBrokerClient
from dispatch_gateway.adapters.opentelemetry import (
    OtelLoggingEnricher,
    OtelPropagator,
    OtelTracer,
    configure_tracing,
)
from dispatch_gateway.app import create_app
from dispatch_gateway.config import DotenvSettingsLoader, GatewaySettings, SettingsFactory
from dispatch_gateway.observability.logging import JsonLoggerFactory


def main() -> None:
    settings = SettingsFactory.create(GatewaySettings, loaders=[DotenvSettingsLoader()])
    JsonLoggerFactory.configure(
        settings.log_level,
        json=settings.log_json,
        extra_processors=[OtelLoggingEnricher()],
    )
    provider = configure_tracing(settings.service_name)
    propagator = OtelPropagator()
    broker = KafkaBrokerClient(settings.kafka_bootstrap_servers, propagator=propagator)
    app = create_app(
        settings,
        broker=broker,
        tracer=OtelTracer(settings.service_name, tracer_provider=provider),
        propagator=propagator,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
