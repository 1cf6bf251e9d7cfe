"""Testing fakes – InMemoryBrokerClient."""
from __future__ import annotations

import dataclasses
from collections import defaultdict

from dispatch_gateway.kernel.messaging import (
    BrokerClient,
    MessageEnvelope,
    PublishFailure,
    PublishOutcome,
    PublishSuccess,
)


@dataclasses.dataclass(frozen=True)
class PublishedRecord:
    topic: str
    key: str | None
    value: MessageEnvelope


class InMemoryBrokerClient(BrokerClient):
    """In-memory broker for tests.

    Every publish is recorded.  With ``fail_with`` set, publishes resolve
    to a :class:`PublishFailure` carrying that cause; otherwise they
    succeed on partition 0 with per-topic increasing offsets.
    """

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self._records: list[PublishedRecord] = []
        self._offsets: dict[str, int] = defaultdict(int)
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        self._started = True

    async def stop(self) -> None:
        self._started = False

    async def publish(
        self,
        topic: str,
        key: str | None,
        value: MessageEnvelope,
    ) -> PublishOutcome:
        self._records.append(PublishedRecord(topic=topic, key=key, value=value))
        if self.fail_with is not None:
            return PublishFailure(topic=topic, cause=self.fail_with)
        offset = self._offsets[topic]
        self._offsets[topic] += 1
        return PublishSuccess(topic=topic, partition=0, offset=offset)

    @property
    def published(self) -> list[PublishedRecord]:
        return list(self._records)

    def of_topic(self, topic: str) -> list[PublishedRecord]:
        return [r for r in self._records if r.topic == topic]


__all__ = ["InMemoryBrokerClient", "PublishedRecord"]
