"""Application invocation – entry/exit logging around HTTP handlers."""
from dispatch_gateway.application.invocation.logger import InvocationLogger

__all__ = ["InvocationLogger"]
