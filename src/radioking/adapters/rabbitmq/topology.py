"""RabbitMQ adapter – exchange / queue declarations shared by both sides."""
from __future__ import annotations

from typing import Any

EXCHANGE_TYPE = "topic"


async def declare_exchange(channel: Any, name: str) -> Any:
    """Declare the durable topic exchange *name* (idempotent)."""
    return await channel.declare_exchange(name, EXCHANGE_TYPE, durable=True)


async def declare_bound_queue(channel: Any, name: str, exchange: Any, routing_key: str) -> Any:
    """Declare the durable queue *name* and bind it to *exchange* on *routing_key*."""
    queue = await channel.declare_queue(name, durable=True)
    await queue.bind(exchange, routing_key=routing_key)
    return queue


__all__ = ["EXCHANGE_TYPE", "declare_bound_queue", "declare_exchange"]
