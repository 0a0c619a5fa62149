"""RabbitMQ adapter – RabbitMQEventPublisher."""
from __future__ import annotations

import logging
from typing import Any

from radioking.adapters.rabbitmq.serializer import TrackPlayedEventSerializer
from radioking.adapters.rabbitmq.topology import declare_exchange
from radioking.domain.events import TrackPlayedEvent
from radioking.kernel.messaging import EventPublisher, MessageSerializer, PublishError
from radioking.observability.correlation import CorrelationContext

logger = logging.getLogger(__name__)


def _require_aio_pika() -> Any:
    try:
        import aio_pika  # type: ignore[import-untyped]
        return aio_pika
    except ImportError as exc:
        raise ImportError("Install 'aio-pika' to use the RabbitMQ adapter") from exc


class RabbitMQEventPublisher(EventPublisher[TrackPlayedEvent]):
    """Publishes persistent JSON messages to a topic exchange via aio-pika.

    ``publish`` never connects on its own and never retries: call
    :meth:`connect` first, and treat :class:`PublishError` as final.
    """

    def __init__(
        self,
        url: str,
        exchange: str,
        routing_key: str,
        serializer: MessageSerializer[TrackPlayedEvent] | None = None,
    ) -> None:
        _require_aio_pika()
        self._url = url
        self._exchange_name = exchange
        self._routing_key = routing_key
        self._serializer = serializer or TrackPlayedEventSerializer()
        self._connection: Any = None
        self._channel: Any = None
        self._exchange: Any = None

    @property
    def is_connected(self) -> bool:
        return self._exchange is not None

    async def connect(self) -> None:
        aio_pika = _require_aio_pika()
        self._connection = await aio_pika.connect_robust(self._url)
        self._channel = await self._connection.channel()
        self._exchange = await declare_exchange(self._channel, self._exchange_name)
        logger.info("rabbitmq.publisher_connected exchange=%s", self._exchange_name)

    async def publish(self, event: TrackPlayedEvent) -> None:
        if self._exchange is None:
            raise PublishError("publisher is not connected")
        aio_pika = _require_aio_pika()
        message = aio_pika.Message(
            body=self._serializer.serialize(event),
            content_type="application/json",
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
            message_id=event.event_id,
            correlation_id=CorrelationContext.correlation_id(),
        )
        try:
            await self._exchange.publish(message, routing_key=self._routing_key)
        except Exception as exc:
            raise PublishError(f"failed to publish message: {exc}") from exc
        logger.debug(
            "rabbitmq.published exchange=%s routing_key=%s event_id=%s",
            self._exchange_name,
            self._routing_key,
            event.event_id,
        )

    async def close(self) -> None:
        self._exchange = None
        if self._channel is not None:
            channel, self._channel = self._channel, None
            await channel.close()
        if self._connection is not None:
            connection, self._connection = self._connection, None
            await connection.close()
            logger.info("rabbitmq.publisher_closed")

    async def __aenter__(self) -> "RabbitMQEventPublisher":
        await self.connect()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()


__all__ = ["RabbitMQEventPublisher"]
