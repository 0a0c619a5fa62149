"""Domain models – Playlist, Track, TrackPlay."""
from __future__ import annotations

import dataclasses
from datetime import datetime

MAX_PLAYLIST_NAME_LENGTH = 255
MAX_TRACK_TITLE_LENGTH = 255
MAX_ARTIST_NAME_LENGTH = 255
MAX_TRACKS_PER_PLAYLIST = 100


@dataclasses.dataclass
class Track:
    """A track belonging to exactly one playlist.

    Its position is not stored: it is the track's index in
    :attr:`Playlist.tracks` at play time.
    """

    title: str
    artist: str
    id: int | None = None
    playlist_id: int | None = None


@dataclasses.dataclass
class Playlist:
    """An ordered list of tracks. Created once, never updated or deleted."""

    name: str
    tracks: list[Track] = dataclasses.field(default_factory=list)
    id: int | None = None


@dataclasses.dataclass(frozen=True)
class TrackPlay:
    """Play-history record, one per consumed :class:`TrackPlayedEvent`."""

    playlist_id: int
    track_id: int
    position: int
    played_at: datetime
    id: int | None = None
    created_at: datetime | None = None


__all__ = [
    "MAX_ARTIST_NAME_LENGTH",
    "MAX_PLAYLIST_NAME_LENGTH",
    "MAX_TRACKS_PER_PLAYLIST",
    "MAX_TRACK_TITLE_LENGTH",
    "Playlist",
    "Track",
    "TrackPlay",
]
