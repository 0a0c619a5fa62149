"""Domain – playlists, tracks, play history and the track-played event."""
from radioking.domain.events import TrackPlayedEvent
from radioking.domain.models import (
    MAX_ARTIST_NAME_LENGTH,
    MAX_PLAYLIST_NAME_LENGTH,
    MAX_TRACK_TITLE_LENGTH,
    MAX_TRACKS_PER_PLAYLIST,
    Playlist,
    Track,
    TrackPlay,
)
from radioking.domain.repositories import PlaylistRepository, TrackPlayRepository

__all__ = [
    "MAX_ARTIST_NAME_LENGTH",
    "MAX_PLAYLIST_NAME_LENGTH",
    "MAX_TRACKS_PER_PLAYLIST",
    "MAX_TRACK_TITLE_LENGTH",
    "Playlist",
    "PlaylistRepository",
    "Track",
    "TrackPlay",
    "TrackPlayRepository",
    "TrackPlayedEvent",
]
