"""Kernel messaging – envelope, publish outcomes and broker port."""
from dispatch_gateway.kernel.messaging.envelope import (
    MessageEnvelope,
    MessageSerializer,
    PublishFailure,
    PublishOutcome,
    PublishSuccess,
)
from dispatch_gateway.kernel.messaging.broker import BrokerClient

__all__ = [
    "BrokerClient",
    "MessageEnvelope",
    "MessageSerializer",
    "PublishFailure",
    "PublishOutcome",
    "PublishSuccess",
]
