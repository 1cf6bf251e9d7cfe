"""Application dispatch – MessageDispatcher."""
from __future__ import annotations

import asyncio

from dispatch_gateway.kernel.messaging import (
    BrokerClient,
    MessageEnvelope,
    PublishFailure,
    PublishOutcome,
    PublishSuccess,
)
from dispatch_gateway.observability.logging import get_logger
from dispatch_gateway.observability.tracing import NoopTracer, SpanKind, Tracer

logger = get_logger(__name__)

DEFAULT_TOPIC = "simple"


class MessageDispatcher:
    """Publish messages on background tasks and log how each one ended.

    :meth:`dispatch` returns as soon as the task is scheduled.  The task
    waits ``delay_ms``, wraps the message in a :class:`MessageEnvelope`,
    publishes it without a key and logs the resulting outcome.  Failures
    are logged, never raised or retried.

    At most ``max_concurrent`` publishes are in flight at once; further
    tasks wait for a free slot.

    Usage::

        dispatcher = MessageDispatcher(broker, delay_ms=0)
        dispatcher.dispatch("hello")
        ...
        await dispatcher.aclose(timeout=5.0)
    """

    def __init__(
        self,
        broker: BrokerClient,
        *,
        topic: str = DEFAULT_TOPIC,
        delay_ms: int = 3000,
        max_concurrent: int = 100,
        tracer: Tracer | None = None,
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self._broker = broker
        self._topic = topic
        self._delay = delay_ms / 1000
        self._slots = asyncio.Semaphore(max_concurrent)
        self._tracer = tracer or NoopTracer()
        # asyncio only keeps weak references to tasks.
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def pending(self) -> int:
        return len(self._pending)

    def dispatch(self, message: str) -> asyncio.Task[None]:
        """Schedule *message* for publishing; must be called from a running loop."""
        task = asyncio.get_running_loop().create_task(
            self._run(message), name=f"dispatch:{self._topic}"
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(self, message: str) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)
        envelope = MessageEnvelope(message=message)
        async with self._slots:
            outcome = await self._publish(envelope)
        self._on_outcome(envelope, outcome)

    async def _publish(self, envelope: MessageEnvelope) -> PublishOutcome:
        attributes = {"messaging.destination.name": self._topic}
        async with self._tracer.start_async_span(
            f"publish {self._topic}", SpanKind.PRODUCER, attributes
        ) as span:
            try:
                outcome = await self._broker.publish(self._topic, None, envelope)
            except Exception as exc:  # noqa: BLE001
                outcome = PublishFailure(topic=self._topic, cause=str(exc) or type(exc).__name__)
            if isinstance(outcome, PublishFailure):
                span.set_attribute("messaging.error", outcome.cause)
            return outcome

    def _on_outcome(self, envelope: MessageEnvelope, outcome: PublishOutcome) -> None:
        if isinstance(outcome, PublishSuccess):
            logger.info(
                "dispatch.delivered",
                envelope=envelope,
                topic=outcome.topic,
                partition=outcome.partition,
                offset=outcome.offset,
            )
        else:
            logger.warning(
                "dispatch.failed",
                envelope=envelope,
                topic=outcome.topic,
                cause=outcome.cause,
            )

    async def drain(self, timeout: float | None = None) -> int:
        """Wait for in-flight dispatches; return how many are still running."""
        if not self._pending:
            return 0
        _, not_done = await asyncio.wait(set(self._pending), timeout=timeout)
        return len(not_done)

    async def aclose(self, timeout: float | None = None) -> None:
        """Drain, then cancel whatever has not finished within *timeout*."""
        remaining = await self.drain(timeout)
        if not remaining:
            return
        logger.warning("dispatch.shutdown.cancelling", count=remaining, timeout=timeout)
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


__all__ = ["DEFAULT_TOPIC", "MessageDispatcher"]
