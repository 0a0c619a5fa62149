"""RabbitMQ adapter – TrackPlayedEventSerializer."""
from __future__ import annotations

import dataclasses

import pydantic

from radioking.domain.events import TrackPlayedEvent
from radioking.kernel.errors import SerializationError
from radioking.kernel.messaging import MessageSerializer
from radioking.kernel.time import ensure_utc

_ADAPTER = pydantic.TypeAdapter(TrackPlayedEvent)


class TrackPlayedEventSerializer(MessageSerializer[TrackPlayedEvent]):
    """JSON codec for :class:`TrackPlayedEvent`.

    Field names are kept as-is and ``played_at`` is written as ISO-8601.
    Decoded timestamps without an offset are taken as UTC.
    """

    def serialize(self, payload: TrackPlayedEvent) -> bytes:
        return _ADAPTER.dump_json(payload)

    def deserialize(self, data: bytes) -> TrackPlayedEvent:
        try:
            event = _ADAPTER.validate_json(data)
        except pydantic.ValidationError as exc:
            raise SerializationError(
                "failed to decode track played event",
                payload_type="TrackPlayedEvent",
                cause=exc,
            ) from exc
        return dataclasses.replace(event, played_at=ensure_utc(event.played_at))


__all__ = ["TrackPlayedEventSerializer"]
