"""Repository ports for playlists and play history.

Concrete implementations live in ``adapters/sqlalchemy``; in-memory doubles
live in ``testing/fakes``. Implementations raise their store's own
exceptions; services translate them into the kernel error taxonomy.
"""

from __future__ import annotations

import abc

from radioking.domain.models import Playlist, TrackPlay


class PlaylistRepository(abc.ABC):
    """Port: playlist persistence (tracks are saved with their playlist)."""

    @abc.abstractmethod
    async def create(self, playlist: Playlist) -> Playlist:
        """Persist *playlist* and its tracks; return it with ids assigned."""

    @abc.abstractmethod
    async def get_all(self) -> list[Playlist]: ...

    @abc.abstractmethod
    async def get_by_id(self, playlist_id: int) -> Playlist | None:
        """Return the playlist with tracks ordered by id, or ``None``."""


class TrackPlayRepository(abc.ABC):
    """Port: append-only play-history persistence."""

    @abc.abstractmethod
    async def create(self, track_play: TrackPlay) -> TrackPlay:
        """Insert a new row; return it with ``id`` and ``created_at`` set."""

    @abc.abstractmethod
    async def get_by_playlist_id(self, playlist_id: int) -> list[TrackPlay]: ...

    @abc.abstractmethod
    async def get_by_track_id(self, track_id: int) -> list[TrackPlay]: ...


__all__ = ["PlaylistRepository", "TrackPlayRepository"]
