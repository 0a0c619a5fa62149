"""Playlist query/command use cases."""
from radioking.application.playlists.service import PlaylistService

__all__ = ["PlaylistService"]
