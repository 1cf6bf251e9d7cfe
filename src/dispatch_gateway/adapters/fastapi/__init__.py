"""FastAPI adapter – middleware, exception mapper, gateway and health routers."""
from dispatch_gateway.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from dispatch_gateway.adapters.fastapi.middleware import (
    CORRELATION_HEADER,
    CorrelationIdMiddleware,
    RequestTracingMiddleware,
)
from dispatch_gateway.adapters.fastapi.routers import GatewayRouter, HealthRouter

__all__ = [
    "CORRELATION_HEADER",
    "CorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "GatewayRouter",
    "HealthRouter",
    "RequestTracingMiddleware",
]
