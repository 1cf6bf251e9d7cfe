"""Kafka adapter – KafkaBrokerClient."""
from __future__ import annotations

import asyncio
from typing import Any

from aiokafka import AIOKafkaProducer
from aiokafka.errors import KafkaError

from dispatch_gateway.kernel.errors import SerializationError
from dispatch_gateway.kernel.messaging import (
    BrokerClient,
    MessageEnvelope,
    MessageSerializer,
    PublishFailure,
    PublishOutcome,
    PublishSuccess,
)
from dispatch_gateway.adapters.kafka.serializer import EnvelopeSerializer
from dispatch_gateway.observability.logging import get_logger
from dispatch_gateway.observability.tracing import TracePropagator

logger = get_logger(__name__)


class KafkaBrokerClient(BrokerClient):
    """aiokafka-backed producer implementing ``BrokerClient``.

    ``publish`` waits for the broker acknowledgement and folds every
    ``KafkaError`` (connection, timeout, broker-side rejection) and
    serialization problem into a :class:`PublishFailure`.  When a
    propagator is given, the current trace context is written into the
    record headers.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        serializer: MessageSerializer[MessageEnvelope] | None = None,
        propagator: TracePropagator | None = None,
        **producer_kwargs: Any,
    ) -> None:
        self._bootstrap_servers = bootstrap_servers
        self._producer_kwargs = producer_kwargs
        self._producer: AIOKafkaProducer | None = None
        self._serializer = serializer or EnvelopeSerializer()
        self._propagator = propagator
        self._started = False
        self._start_lock = asyncio.Lock()

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        await self._ensure_started()

    async def _ensure_started(self) -> AIOKafkaProducer:
        async with self._start_lock:
            if self._producer is not None and self._started:
                return self._producer
            # aiokafka binds the producer to the running loop on construction.
            producer = AIOKafkaProducer(
                bootstrap_servers=self._bootstrap_servers, **self._producer_kwargs
            )
            try:
                await producer.start()
            except BaseException:
                await producer.stop()
                raise
            self._producer = producer
            self._started = True
            logger.info("kafka.producer.started")
            return producer

    async def stop(self) -> None:
        if self._producer is None:
            return
        await self._producer.stop()
        self._producer = None
        self._started = False
        logger.info("kafka.producer.stopped")

    def _headers(self) -> list[tuple[str, bytes]]:
        if self._propagator is None:
            return []
        return [(k, v.encode()) for k, v in self._propagator.inject({}).items()]

    async def publish(
        self,
        topic: str,
        key: str | None,
        value: MessageEnvelope,
    ) -> PublishOutcome:
        try:
            producer = await self._ensure_started()
            delivery = await producer.send(
                topic,
                value=self._serializer.serialize(value),
                key=key.encode() if key is not None else None,
                headers=self._headers() or None,
            )
            metadata = await delivery
        except (KafkaError, SerializationError) as exc:
            return PublishFailure(topic=topic, cause=str(exc) or type(exc).__name__)

        logger.debug(
            "kafka.published",
            topic=topic,
            partition=metadata.partition,
            offset=metadata.offset,
        )
        return PublishSuccess(topic=topic, partition=metadata.partition, offset=metadata.offset)


__all__ = ["KafkaBrokerClient"]
