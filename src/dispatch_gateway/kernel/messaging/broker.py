"""Kernel messaging – BrokerClient port."""
from __future__ import annotations

import abc

from dispatch_gateway.kernel.messaging.envelope import MessageEnvelope, PublishOutcome


class BrokerClient(abc.ABC):
    """Port: publish an envelope to a named topic.

    Implementations resolve delivery failures into a
    :class:`~dispatch_gateway.kernel.messaging.PublishFailure` instead of
    raising, and must be safe to share between concurrent dispatches.
    """

    @abc.abstractmethod
    async def start(self) -> None: ...

    @abc.abstractmethod
    async def stop(self) -> None: ...

    @property
    @abc.abstractmethod
    def started(self) -> bool: ...

    @abc.abstractmethod
    async def publish(
        self,
        topic: str,
        key: str | None,
        value: MessageEnvelope,
    ) -> PublishOutcome: ...

    async def __aenter__(self) -> "BrokerClient":
        await self.start()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.stop()


__all__ = ["BrokerClient"]
