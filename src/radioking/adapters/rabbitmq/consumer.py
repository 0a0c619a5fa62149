"""RabbitMQ adapter – RabbitMQEventConsumer.

Each delivery is acknowledged manually:

* undecodable body → ``reject(requeue=False)``, handler not called
* handler returned → ``ack()``
* handler raised   → ``reject(requeue=policy.should_requeue(...))``
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

import structlog

from radioking.adapters.rabbitmq.serializer import TrackPlayedEventSerializer
from radioking.adapters.rabbitmq.topology import declare_bound_queue, declare_exchange
from radioking.domain.events import TrackPlayedEvent
from radioking.kernel.errors import SerializationError
from radioking.kernel.messaging import (
    AlwaysRequeue,
    ConsumerError,
    EventConsumer,
    FailedDelivery,
    MessageSerializer,
    RedeliveryPolicy,
)

logger = logging.getLogger(__name__)


def _require_aio_pika() -> Any:
    try:
        import aio_pika  # type: ignore[import-untyped]
        return aio_pika
    except ImportError as exc:
        raise ImportError("Install 'aio-pika' to use the RabbitMQ adapter") from exc


Handler = Callable[[TrackPlayedEvent], Awaitable[object]]


class RabbitMQEventConsumer(EventConsumer[TrackPlayedEvent]):
    """aio-pika queue consumer with manual acknowledgment."""

    def __init__(
        self,
        url: str,
        exchange: str,
        queue: str,
        routing_key: str,
        prefetch_count: int = 1,
        serializer: MessageSerializer[TrackPlayedEvent] | None = None,
        redelivery_policy: RedeliveryPolicy | None = None,
    ) -> None:
        _require_aio_pika()
        self._url = url
        self._exchange_name = exchange
        self._queue_name = queue
        self._routing_key = routing_key
        self._prefetch_count = prefetch_count
        self._serializer = serializer or TrackPlayedEventSerializer()
        self._policy = redelivery_policy or AlwaysRequeue()
        self._connection: Any = None
        self._channel: Any = None
        self._queue: Any = None

    async def connect(self) -> None:
        aio_pika = _require_aio_pika()
        self._connection = await aio_pika.connect_robust(self._url)
        self._channel = await self._connection.channel()
        await self._channel.set_qos(prefetch_count=self._prefetch_count)
        exchange = await declare_exchange(self._channel, self._exchange_name)
        self._queue = await declare_bound_queue(
            self._channel, self._queue_name, exchange, self._routing_key
        )
        logger.info(
            "rabbitmq.consumer_connected exchange=%s queue=%s routing_key=%s prefetch=%d",
            self._exchange_name,
            self._queue_name,
            self._routing_key,
            self._prefetch_count,
        )

    async def consume(self, handler: Handler, stop: asyncio.Event) -> asyncio.Task[None]:
        if self._queue is None:
            raise ConsumerError("consumer is not connected")
        queue_iter = self._queue.iterator()
        await queue_iter.consume()
        logger.info("rabbitmq.consuming queue=%s", self._queue_name)
        return asyncio.create_task(
            self._run(queue_iter, handler, stop), name=f"rabbitmq-consume-{self._queue_name}"
        )

    async def close(self) -> None:
        self._queue = None
        if self._channel is not None:
            channel, self._channel = self._channel, None
            await channel.close()
        if self._connection is not None:
            connection, self._connection = self._connection, None
            await connection.close()
            logger.info("rabbitmq.consumer_closed")

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    async def _run(self, queue_iter: Any, handler: Handler, stop: asyncio.Event) -> None:
        stop_wait = asyncio.ensure_future(stop.wait())
        try:
            while True:
                next_message = asyncio.ensure_future(queue_iter.__anext__())
                await asyncio.wait({next_message, stop_wait}, return_when=asyncio.FIRST_COMPLETED)
                if stop_wait.done():
                    await self._abandon(next_message)
                    break
                try:
                    message = next_message.result()
                except StopAsyncIteration:
                    logger.warning("rabbitmq.subscription_closed queue=%s", self._queue_name)
                    break
                await self._process(message, handler)
        finally:
            stop_wait.cancel()
            await queue_iter.close()
            logger.info("rabbitmq.consume_stopped queue=%s", self._queue_name)

    async def _abandon(self, next_message: asyncio.Future[Any]) -> None:
        """Give back a message that arrived together with the stop signal."""
        if not next_message.done():
            next_message.cancel()
            return
        if next_message.cancelled() or next_message.exception() is not None:
            return
        await next_message.result().reject(requeue=True)

    async def _process(self, message: Any, handler: Handler) -> None:
        correlation_id = message.correlation_id or message.message_id
        with structlog.contextvars.bound_contextvars(correlation_id=correlation_id):
            try:
                event = self._serializer.deserialize(message.body)
            except SerializationError as exc:
                logger.error(
                    "rabbitmq.decode_failed message_id=%s exc=%s", message.message_id, exc
                )
                await self._settle(message, ack=False, requeue=False)
                return

            try:
                await handler(event)
            except Exception as exc:
                requeue = self._policy.should_requeue(
                    FailedDelivery(
                        message_id=message.message_id,
                        redelivered=bool(message.redelivered),
                        error=exc,
                    )
                )
                logger.error(
                    "rabbitmq.handler_failed event_id=%s requeue=%s exc=%r",
                    event.event_id,
                    requeue,
                    exc,
                )
                await self._settle(message, ack=False, requeue=requeue)
                return

            await self._settle(message, ack=True)
            logger.debug("rabbitmq.acked event_id=%s", event.event_id)

    async def _settle(self, message: Any, *, ack: bool, requeue: bool = False) -> None:
        # A failed ack/reject leaves the delivery unacked; the broker redelivers
        # it once the channel closes.
        try:
            if ack:
                await message.ack()
            else:
                await message.reject(requeue=requeue)
        except Exception as exc:
            logger.error(
                "rabbitmq.settle_failed message_id=%s ack=%s exc=%r",
                message.message_id,
                ack,
                exc,
            )


__all__ = ["RabbitMQEventConsumer"]
