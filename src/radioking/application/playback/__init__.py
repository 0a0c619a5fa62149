"""Playlist playback – emits one TrackPlayedEvent per track."""
from radioking.application.playback.service import (
    PlaylistPlayService,
    PlayPlaylistResult,
    TrackPublishError,
)

__all__ = ["PlayPlaylistResult", "PlaylistPlayService", "TrackPublishError"]
