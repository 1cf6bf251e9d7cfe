"""Shared fixtures for the dispatch-gateway test suite."""
from __future__ import annotations

from typing import Iterator

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from dispatch_gateway.adapters.opentelemetry import OtelTracer
from dispatch_gateway.config import GatewaySettings
from dispatch_gateway.testing.fakes import InMemoryBrokerClient


@pytest.fixture(autouse=True)
def _clean_structlog_context() -> Iterator[None]:
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def broker() -> InMemoryBrokerClient:
    return InMemoryBrokerClient()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def tracer(tracer_provider: TracerProvider) -> OtelTracer:
    return OtelTracer("dispatch-gateway-test", tracer_provider=tracer_provider)


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(dispatch_delay_ms=0, shutdown_timeout_seconds=5.0)
