"""SQLAlchemy adapter – playlist and play-history repositories.

Each operation runs in its own session and transaction. Rows are mapped to
domain dataclasses before the session closes, so callers never see ORM
objects.
"""
from __future__ import annotations

from typing import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from radioking.adapters.sqlalchemy.models import PlaylistRow, TrackPlayRow, TrackRow
from radioking.domain.models import Playlist, Track, TrackPlay
from radioking.domain.repositories import PlaylistRepository, TrackPlayRepository
from radioking.kernel.time import ensure_utc

SessionFactory = Callable[[], AsyncSession]


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def track_from_row(row: TrackRow) -> Track:
    return Track(id=row.id, playlist_id=row.playlist_id, title=row.title, artist=row.artist)


def playlist_from_row(row: PlaylistRow) -> Playlist:
    return Playlist(id=row.id, name=row.name, tracks=[track_from_row(t) for t in row.tracks])


def playlist_to_row(playlist: Playlist) -> PlaylistRow:
    return PlaylistRow(
        name=playlist.name,
        tracks=[TrackRow(title=t.title, artist=t.artist) for t in playlist.tracks],
    )


def track_play_from_row(row: TrackPlayRow) -> TrackPlay:
    return TrackPlay(
        id=row.id,
        playlist_id=row.playlist_id,
        track_id=row.track_id,
        position=row.position,
        played_at=ensure_utc(row.played_at),
        created_at=ensure_utc(row.created_at),
    )


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


class SqlAlchemyPlaylistRepository(PlaylistRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def create(self, playlist: Playlist) -> Playlist:
        row = playlist_to_row(playlist)
        async with self._session_factory() as session, session.begin():
            session.add(row)
            await session.flush()
            return playlist_from_row(row)

    async def get_all(self) -> list[Playlist]:
        stmt = select(PlaylistRow).options(selectinload(PlaylistRow.tracks)).order_by(PlaylistRow.id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [playlist_from_row(row) for row in result.scalars().all()]

    async def get_by_id(self, playlist_id: int) -> Playlist | None:
        stmt = (
            select(PlaylistRow)
            .options(selectinload(PlaylistRow.tracks))
            .where(PlaylistRow.id == playlist_id)
        )
        async with self._session_factory() as session:
            row = (await session.execute(stmt)).scalar_one_or_none()
            return playlist_from_row(row) if row is not None else None


class SqlAlchemyTrackPlayRepository(TrackPlayRepository):
    """Append-only; queries return newest ``played_at`` first."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def create(self, track_play: TrackPlay) -> TrackPlay:
        row = TrackPlayRow(
            playlist_id=track_play.playlist_id,
            track_id=track_play.track_id,
            position=track_play.position,
            played_at=ensure_utc(track_play.played_at),
        )
        async with self._session_factory() as session, session.begin():
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return track_play_from_row(row)

    async def get_by_playlist_id(self, playlist_id: int) -> list[TrackPlay]:
        return await self._select(TrackPlayRow.playlist_id == playlist_id)

    async def get_by_track_id(self, track_id: int) -> list[TrackPlay]:
        return await self._select(TrackPlayRow.track_id == track_id)

    async def _select(self, criterion: object) -> list[TrackPlay]:
        stmt = (
            select(TrackPlayRow)
            .where(criterion)  # type: ignore[arg-type]
            .order_by(TrackPlayRow.played_at.desc(), TrackPlayRow.id.desc())
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [track_play_from_row(row) for row in result.scalars().all()]


__all__ = [
    "SqlAlchemyPlaylistRepository",
    "SqlAlchemyTrackPlayRepository",
    "playlist_from_row",
    "playlist_to_row",
    "track_play_from_row",
]
