"""Kafka adapter – EnvelopeSerializer."""
from __future__ import annotations

import json

from dispatch_gateway.kernel.errors import SerializationError
from dispatch_gateway.kernel.messaging import MessageEnvelope, MessageSerializer


class EnvelopeSerializer(MessageSerializer[MessageEnvelope]):
    """JSON wire format for :class:`MessageEnvelope` (``{"message": "..."}``)."""

    def serialize(self, payload: MessageEnvelope) -> bytes:
        try:
            return json.dumps(payload.to_dict(), ensure_ascii=False).encode()
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot serialize {type(payload).__name__}: {exc}",
                payload_type=type(payload).__name__,
                cause=exc,
            ) from exc

    def deserialize(self, data: bytes) -> MessageEnvelope:
        try:
            parsed = json.loads(data)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Invalid envelope JSON: {exc}", cause=exc) from exc
        if not isinstance(parsed, dict) or not isinstance(parsed.get("message"), str):
            raise SerializationError(
                "Envelope must be an object with a string 'message' field",
                payload_type=type(parsed).__name__,
            )
        return MessageEnvelope(message=parsed["message"])


__all__ = ["EnvelopeSerializer"]
