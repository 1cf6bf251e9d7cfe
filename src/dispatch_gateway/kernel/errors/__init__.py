"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── TraceContextMissingError
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from dispatch_gateway.kernel.errors.application import (
    ApplicationError,
    TraceContextMissingError,
)
from dispatch_gateway.kernel.errors.base import BaseError
from dispatch_gateway.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
    "TraceContextMissingError",
]
