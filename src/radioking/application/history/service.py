"""Play-history use cases – TrackPlayService."""
from __future__ import annotations

import logging

from radioking.domain.events import TrackPlayedEvent
from radioking.domain.models import TrackPlay
from radioking.domain.repositories import TrackPlayRepository
from radioking.kernel.errors import InternalError

logger = logging.getLogger(__name__)


class TrackPlayService:
    """Turns consumed events into play-history rows.

    Delivery is at-least-once and there is no dedup on ``event_id``: the same
    event recorded twice produces two rows.
    """

    def __init__(self, repository: TrackPlayRepository) -> None:
        self._repository = repository

    async def record_track_play(self, event: TrackPlayedEvent) -> TrackPlay:
        track_play = TrackPlay(
            playlist_id=event.playlist_id,
            track_id=event.track_id,
            position=event.position,
            played_at=event.played_at,
        )
        try:
            saved = await self._repository.create(track_play)
        except Exception as exc:
            raise InternalError("failed to record track play", cause=exc) from exc
        logger.info(
            "track_play.recorded playlist_id=%s track_id=%s position=%d played_at=%s event_id=%s",
            saved.playlist_id,
            saved.track_id,
            saved.position,
            saved.played_at.isoformat(),
            event.event_id,
        )
        return saved

    async def get_playlist_plays(self, playlist_id: int) -> list[TrackPlay]:
        """Plays of one playlist, newest ``played_at`` first."""
        try:
            return await self._repository.get_by_playlist_id(playlist_id)
        except Exception as exc:
            raise InternalError("failed to get playlist plays", cause=exc) from exc

    async def get_track_plays(self, track_id: int) -> list[TrackPlay]:
        """Plays of one track, newest ``played_at`` first."""
        try:
            return await self._repository.get_by_track_id(track_id)
        except Exception as exc:
            raise InternalError("failed to get track plays", cause=exc) from exc


__all__ = ["TrackPlayService"]
