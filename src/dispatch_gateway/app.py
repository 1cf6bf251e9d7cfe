"""Composition root – wires settings, broker, tracing and HTTP surface."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from fastapi import FastAPI

from dispatch_gateway.adapters.fastapi import (
    CorrelationIdMiddleware,
    FastAPIExceptionMapper,
    GatewayRouter,
    HealthRouter,
    RequestTracingMiddleware,
)
from dispatch_gateway.adapters.opentelemetry import OtelPropagator, OtelTraceProvider, OtelTracer
from dispatch_gateway.application.dispatch import MessageDispatcher
from dispatch_gateway.application.invocation import InvocationLogger
from dispatch_gateway.config import GatewaySettings
from dispatch_gateway.kernel.messaging import BrokerClient
from dispatch_gateway.observability.logging import get_logger
from dispatch_gateway.observability.tracing import TracePropagator, TraceProvider, Tracer

logger = get_logger(__name__)


def create_app(
    settings: GatewaySettings,
    *,
    broker: BrokerClient,
    trace_provider: TraceProvider | None = None,
    tracer: Tracer | None = None,
    propagator: TracePropagator | None = None,
) -> FastAPI:
    """Build the gateway application.

    Middleware, outermost first: request tracing (opens the server span),
    correlation id (reads the span's trace id).  Every handler on the
    gateway router is wrapped by :class:`InvocationLogger`.

    The broker is started in the lifespan; a failed start is logged and
    retried by the first publish.  On shutdown in-flight dispatches get
    ``shutdown_timeout_seconds`` to finish before the broker is stopped.
    """
    tracer = tracer or OtelTracer(settings.service_name)
    trace_provider = trace_provider or OtelTraceProvider()
    propagator = propagator or OtelPropagator()

    dispatcher = MessageDispatcher(
        broker,
        topic=settings.topic,
        delay_ms=settings.dispatch_delay_ms,
        max_concurrent=settings.max_concurrent_dispatches,
        tracer=tracer,
    )

    async def broker_started() -> bool:
        return broker.started

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        try:
            await broker.start()
        except Exception as exc:  # noqa: BLE001
            logger.warning("broker.start_failed", error=str(exc) or type(exc).__name__)
        logger.info("gateway.started", topic=settings.topic, delay_ms=settings.dispatch_delay_ms)
        yield
        await dispatcher.aclose(settings.shutdown_timeout_seconds)
        if broker.started:
            await broker.stop()
        logger.info("gateway.stopped")

    app = FastAPI(title=settings.service_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.dispatcher = dispatcher

    FastAPIExceptionMapper().register(app)
    app.include_router(GatewayRouter(dispatcher, invocation_logger=InvocationLogger()))
    app.include_router(HealthRouter(readiness_checks=[broker_started]))

    app.add_middleware(CorrelationIdMiddleware, trace_provider=trace_provider)
    app.add_middleware(RequestTracingMiddleware, tracer=tracer, propagator=propagator)
    return app


__all__ = ["create_app"]
