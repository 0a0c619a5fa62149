"""Playlist use cases – create, list and fetch with input validation."""
from __future__ import annotations

import logging

from radioking.domain.models import (
    MAX_ARTIST_NAME_LENGTH,
    MAX_PLAYLIST_NAME_LENGTH,
    MAX_TRACK_TITLE_LENGTH,
    MAX_TRACKS_PER_PLAYLIST,
    Playlist,
    Track,
)
from radioking.domain.repositories import PlaylistRepository
from radioking.kernel.errors import InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class PlaylistService:
    """Validates and persists playlists; fetches them by id."""

    def __init__(self, repository: PlaylistRepository) -> None:
        self._repository = repository

    async def create_playlist(self, playlist: Playlist) -> Playlist:
        self._validate_playlist(playlist)
        try:
            created = await self._repository.create(playlist)
        except Exception as exc:
            raise InternalError("failed to create playlist", cause=exc) from exc
        logger.info(
            "playlist.created id=%s name=%r tracks=%d",
            created.id,
            created.name,
            len(created.tracks),
        )
        return created

    async def list_playlists(self) -> list[Playlist]:
        try:
            return await self._repository.get_all()
        except Exception as exc:
            raise InternalError("failed to list playlists", cause=exc) from exc

    async def get_playlist(self, playlist_id: int) -> Playlist:
        if playlist_id <= 0:
            raise ValidationError("invalid playlist ID")
        try:
            playlist = await self._repository.get_by_id(playlist_id)
        except Exception as exc:
            raise InternalError("failed to get playlist", cause=exc) from exc
        if playlist is None:
            raise NotFoundError("playlist", playlist_id)
        return playlist

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_playlist(self, playlist: Playlist) -> None:
        if not playlist.name.strip():
            raise ValidationError("playlist name cannot be empty")
        if len(playlist.name) > MAX_PLAYLIST_NAME_LENGTH:
            raise ValidationError(
                f"playlist name too long (max {MAX_PLAYLIST_NAME_LENGTH} characters)"
            )
        if len(playlist.tracks) > MAX_TRACKS_PER_PLAYLIST:
            raise ValidationError(
                f"playlist cannot have more than {MAX_TRACKS_PER_PLAYLIST} tracks"
            )
        for index, track in enumerate(playlist.tracks, start=1):
            problem = self._track_problem(track)
            if problem is not None:
                raise ValidationError(
                    f"track {index} invalid: {problem}",
                    errors=[{"track": index, "message": problem}],
                )

    @staticmethod
    def _track_problem(track: Track) -> str | None:
        if not track.title.strip():
            return "track title cannot be empty"
        if not track.artist.strip():
            return "track artist cannot be empty"
        if len(track.title) > MAX_TRACK_TITLE_LENGTH:
            return f"track title too long (max {MAX_TRACK_TITLE_LENGTH} characters)"
        if len(track.artist) > MAX_ARTIST_NAME_LENGTH:
            return f"artist name too long (max {MAX_ARTIST_NAME_LENGTH} characters)"
        return None


__all__ = ["PlaylistService"]
