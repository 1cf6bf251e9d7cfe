"""Kernel messaging – MessageEnvelope and publish outcome variants."""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class MessageEnvelope:
    """Value wrapper sent to the broker for a single dispatched message."""

    message: str

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class PublishSuccess:
    """The broker acknowledged the record."""

    topic: str
    partition: int
    offset: int


@dataclasses.dataclass(frozen=True)
class PublishFailure:
    """The record could not be delivered; ``cause`` is a readable reason."""

    topic: str
    cause: str


PublishOutcome: TypeAlias = PublishSuccess | PublishFailure


class MessageSerializer(abc.ABC, Generic[T]):
    """Port: serialize / deserialize message values."""

    @abc.abstractmethod
    def serialize(self, payload: T) -> bytes: ...

    @abc.abstractmethod
    def deserialize(self, data: bytes) -> T: ...


__all__ = [
    "MessageEnvelope",
    "MessageSerializer",
    "PublishFailure",
    "PublishOutcome",
    "PublishSuccess",
]
