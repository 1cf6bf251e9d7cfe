"""Application dispatch – fire-and-forget publishing of envelopes."""
from dispatch_gateway.application.dispatch.dispatcher import DEFAULT_TOPIC, MessageDispatcher

__all__ = ["DEFAULT_TOPIC", "MessageDispatcher"]
