"""Testing support – in-memory doubles for the broker and trace ports."""
from dispatch_gateway.testing.fakes import InMemoryBrokerClient, StaticTraceProvider

__all__ = ["InMemoryBrokerClient", "StaticTraceProvider"]
