"""Unit tests for the Kafka adapter (aiokafka mocked, no broker required)."""
from __future__ import annotations

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from aiokafka.errors import KafkaConnectionError, KafkaTimeoutError

from dispatch_gateway.adapters.kafka import EnvelopeSerializer, KafkaBrokerClient
from dispatch_gateway.kernel.errors import SerializationError
from dispatch_gateway.kernel.messaging import MessageEnvelope, PublishFailure, PublishSuccess


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _acked(partition: int = 0, offset: int = 42) -> Any:
    async def send(*args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        fut = asyncio.get_running_loop().create_future()
        fut.set_result(MagicMock(partition=partition, offset=offset))
        return fut

    return send


def _rejected(exc: Exception) -> Any:
    async def send(*args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        fut = asyncio.get_running_loop().create_future()
        fut.set_exception(exc)
        return fut

    return send


def _mock_producer() -> MagicMock:
    mock_prod = MagicMock()
    mock_prod.start = AsyncMock()
    mock_prod.stop = AsyncMock()
    mock_prod.send = AsyncMock(side_effect=_acked())
    return mock_prod


def _publish(client: KafkaBrokerClient, message: str = "hello", topic: str = "simple") -> Any:
    return asyncio.run(client.publish(topic, None, MessageEnvelope(message)))


# ===========================================================================
# EnvelopeSerializer
# ===========================================================================

class TestEnvelopeSerializer:
    def test_serialize_to_json_object(self) -> None:
        result = EnvelopeSerializer().serialize(MessageEnvelope("hello"))
        assert isinstance(result, bytes)
        assert json.loads(result) == {"message": "hello"}

    def test_serialize_keeps_unicode(self) -> None:
        result = EnvelopeSerializer().serialize(MessageEnvelope("olá"))
        assert "olá".encode() in result

    def test_deserialize(self) -> None:
        assert EnvelopeSerializer().deserialize(b'{"message": "hi"}') == MessageEnvelope("hi")

    def test_deserialize_invalid_json_raises(self) -> None:
        with pytest.raises(SerializationError):
            EnvelopeSerializer().deserialize(b"not json")

    @pytest.mark.parametrize("data", [b"[]", b'{"message": 1}', b"{}"])
    def test_deserialize_wrong_shape_raises(self, data: bytes) -> None:
        with pytest.raises(SerializationError):
            EnvelopeSerializer().deserialize(data)


# ===========================================================================
# KafkaBrokerClient
# ===========================================================================

class TestKafkaBrokerClientLifecycle:
    def test_producer_created_lazily_on_start(self) -> None:
        mock_prod = _mock_producer()
        with patch("dispatch_gateway.adapters.kafka.producer.AIOKafkaProducer", return_value=mock_prod) as ctor:
            client = KafkaBrokerClient("broker1:9093", acks="all")
            ctor.assert_not_called()
            asyncio.run(client.start())
        ctor.assert_called_once_with(bootstrap_servers="broker1:9093", acks="all")
        mock_prod.start.assert_awaited_once()
        assert client.started is True

    def test_stop_stops_producer(self) -> None:
        mock_prod = _mock_producer()
        with patch("dispatch_gateway.adapters.kafka.producer.AIOKafkaProducer", return_value=mock_prod):
            client = KafkaBrokerClient("localhost:9093")

            async def run() -> None:
                await client.start()
                await client.stop()

            asyncio.run(run())
        mock_prod.stop.assert_awaited_once()
        assert client.started is False

    def test_stop_before_start_is_noop(self) -> None:
        client = KafkaBrokerClient("localhost:9093")
        asyncio.run(client.stop())
        assert client.started is False

    def test_context_manager_starts_and_stops(self) -> None:
        mock_prod = _mock_producer()
        with patch("dispatch_gateway.adapters.kafka.producer.AIOKafkaProducer", return_value=mock_prod):
            client = KafkaBrokerClient("localhost:9093")

            async def run() -> None:
                async with client:
                    assert client.started

            asyncio.run(run())
        mock_prod.start.assert_awaited_once()
        mock_prod.stop.assert_awaited_once()


class TestKafkaBrokerClientPublish:
    def _client(self, mock_prod: MagicMock, **kwargs: Any) -> KafkaBrokerClient:
        with patch("dispatch_gateway.adapters.kafka.producer.AIOKafkaProducer", return_value=mock_prod):
            client = KafkaBrokerClient("localhost:9093", **kwargs)
            asyncio.run(client.start())
        return client

    def test_success_outcome_carries_partition_and_offset(self) -> None:
        mock_prod = _mock_producer()
        mock_prod.send.side_effect = _acked(partition=2, offset=17)
        outcome = _publish(self._client(mock_prod))
        assert outcome == PublishSuccess(topic="simple", partition=2, offset=17)

    def test_sends_json_value_without_key(self) -> None:
        mock_prod = _mock_producer()
        _publish(self._client(mock_prod), message="hello")
        call = mock_prod.send.call_args
        assert call.args[0] == "simple"
        assert json.loads(call.kwargs["value"]) == {"message": "hello"}
        assert call.kwargs["key"] is None
        assert call.kwargs["headers"] is None

    def test_key_is_encoded_when_given(self) -> None:
        mock_prod = _mock_producer()
        client = self._client(mock_prod)
        asyncio.run(client.publish("simple", "k-1", MessageEnvelope("x")))
        assert mock_prod.send.call_args.kwargs["key"] == b"k-1"

    def test_trace_headers_injected_by_propagator(self) -> None:
        propagator = MagicMock()
        propagator.inject.return_value = {"traceparent": "00-abc-def-01"}
        mock_prod = _mock_producer()
        _publish(self._client(mock_prod, propagator=propagator))
        assert mock_prod.send.call_args.kwargs["headers"] == [("traceparent", b"00-abc-def-01")]

    def test_send_error_becomes_failure(self) -> None:
        mock_prod = _mock_producer()
        mock_prod.send.side_effect = KafkaTimeoutError()
        outcome = _publish(self._client(mock_prod))
        assert isinstance(outcome, PublishFailure)
        assert outcome.topic == "simple"
        assert "KafkaTimeoutError" in outcome.cause

    def test_delivery_error_becomes_failure(self) -> None:
        mock_prod = _mock_producer()
        mock_prod.send.side_effect = _rejected(KafkaConnectionError("broker down"))
        outcome = _publish(self._client(mock_prod))
        assert isinstance(outcome, PublishFailure)
        assert "broker down" in outcome.cause

    def test_serialization_error_becomes_failure(self) -> None:
        serializer = MagicMock()
        serializer.serialize.side_effect = SerializationError("cannot encode")
        mock_prod = _mock_producer()
        outcome = _publish(self._client(mock_prod, serializer=serializer))
        assert outcome == PublishFailure(topic="simple", cause="cannot encode")
        mock_prod.send.assert_not_called()

    def test_publish_auto_starts(self) -> None:
        mock_prod = _mock_producer()
        with patch("dispatch_gateway.adapters.kafka.producer.AIOKafkaProducer", return_value=mock_prod):
            client = KafkaBrokerClient("localhost:9093")
            outcome = _publish(client)
        mock_prod.start.assert_awaited_once()
        assert isinstance(outcome, PublishSuccess)

    def test_failed_start_becomes_failure_and_is_retried(self) -> None:
        mock_prod = _mock_producer()
        mock_prod.start.side_effect = [KafkaConnectionError("unreachable"), None]
        with patch("dispatch_gateway.adapters.kafka.producer.AIOKafkaProducer", return_value=mock_prod):
            client = KafkaBrokerClient("localhost:9093")
            first = _publish(client)
            assert isinstance(first, PublishFailure)
            assert client.started is False
            mock_prod.stop.assert_awaited_once()
            second = _publish(client)
        assert isinstance(second, PublishSuccess)
        assert mock_prod.start.await_count == 2
