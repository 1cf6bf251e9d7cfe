"""Observability – structured logging helpers."""
from dispatch_gateway.observability.logging.factory import JsonLoggerFactory
from dispatch_gateway.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
