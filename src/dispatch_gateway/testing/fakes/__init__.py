"""Testing fakes – in-memory doubles for kernel ports."""
from dispatch_gateway.testing.fakes.broker import InMemoryBrokerClient, PublishedRecord
from dispatch_gateway.testing.fakes.tracing import StaticTraceProvider

__all__ = ["InMemoryBrokerClient", "PublishedRecord", "StaticTraceProvider"]
