"""Kafka adapter – aiokafka-backed broker client and envelope serializer."""
from dispatch_gateway.adapters.kafka.serializer import EnvelopeSerializer
from dispatch_gateway.adapters.kafka.producer import KafkaBrokerClient

__all__ = ["EnvelopeSerializer", "KafkaBrokerClient"]
