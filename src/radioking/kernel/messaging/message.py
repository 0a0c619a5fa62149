"""Kernel messaging – serializer, publisher and consumer ports."""
from __future__ import annotations

import abc
import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


class MessageSerializer(abc.ABC, Generic[T]):
    """Port: serialize / deserialize message payloads.

    ``deserialize`` raises :class:`~radioking.kernel.errors.SerializationError`
    for payloads that can never be decoded.
    """

    @abc.abstractmethod
    def serialize(self, payload: T) -> bytes: ...

    @abc.abstractmethod
    def deserialize(self, data: bytes) -> T: ...


class EventPublisher(abc.ABC, Generic[T]):
    """Port: durable, at-least-once publish of one event.

    Implementations never retry; failures surface as
    :class:`~radioking.kernel.messaging.PublishError`.
    """

    @abc.abstractmethod
    async def connect(self) -> None: ...

    @abc.abstractmethod
    async def publish(self, event: T) -> None: ...

    @abc.abstractmethod
    async def close(self) -> None:
        """Release channel and connection. Safe to call more than once."""

    @property
    @abc.abstractmethod
    def is_connected(self) -> bool: ...


class EventConsumer(abc.ABC, Generic[T]):
    """Port: subscription to a queue with manual acknowledgment."""

    @abc.abstractmethod
    async def connect(self) -> None: ...

    @abc.abstractmethod
    async def consume(
        self,
        handler: Callable[[T], Awaitable[object]],
        stop: asyncio.Event,
    ) -> asyncio.Task[None]:
        """Subscribe and spawn the consumption loop.

        Returns once the subscription is registered. The returned task runs
        until *stop* is set or the broker closes the subscription.
        """

    @abc.abstractmethod
    async def close(self) -> None:
        """Release channel and connection. Safe to call more than once."""


__all__ = [
    "EventConsumer",
    "EventPublisher",
    "MessageSerializer",
]
