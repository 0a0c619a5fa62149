"""Domain events – TrackPlayedEvent (wire payload)."""
from __future__ import annotations

import dataclasses
from datetime import datetime


@dataclasses.dataclass(frozen=True)
class TrackPlayedEvent:
    """Emitted once per track when a playlist is played.

    Serialized as JSON with these exact field names; ``played_at`` travels
    as ISO-8601 and ``event_id`` is a UUID4 string unique per event.
    """

    playlist_id: int
    track_id: int
    track_title: str
    artist: str
    position: int
    played_at: datetime
    event_id: str


__all__ = ["TrackPlayedEvent"]
