"""Playback use case – PlaylistPlayService.

``play_playlist`` loads a playlist and publishes one
:class:`~radioking.domain.events.TrackPlayedEvent` per track, in position
order, all stamped with the same ``played_at``. The first publish failure
aborts the loop; events already published stay published.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Callable
from uuid import uuid4

from radioking.application.playlists import PlaylistService
from radioking.domain.events import TrackPlayedEvent
from radioking.domain.models import Playlist
from radioking.kernel.messaging import EventPublisher, PublishError
from radioking.kernel.time import Clock, SystemClock

logger = logging.getLogger(__name__)

PLAYING_MESSAGE = "Playlist is being played"
EMPTY_MESSAGE = "Playlist is empty, nothing to play"


@dataclasses.dataclass(frozen=True)
class PlayPlaylistResult:
    """Outcome of a successful ``play_playlist`` call."""

    playlist_id: int
    tracks_count: int
    message: str


class TrackPublishError(PublishError):
    """Publishing the event of one track failed; later tracks were skipped."""

    def __init__(self, track_id: int, position: int, cause: BaseException) -> None:
        super().__init__(f"failed to publish event for track {track_id}: {cause}")
        self.track_id = track_id
        self.position = position
        self.cause = cause


def _new_event_id() -> str:
    return str(uuid4())


class PlaylistPlayService:
    """Play orchestrator."""

    def __init__(
        self,
        playlists: PlaylistService,
        publisher: EventPublisher[TrackPlayedEvent],
        clock: Clock | None = None,
        event_id_factory: Callable[[], str] = _new_event_id,
    ) -> None:
        self._playlists = playlists
        self._publisher = publisher
        self._clock = clock or SystemClock()
        self._event_id_factory = event_id_factory

    async def play_playlist(self, playlist_id: int) -> PlayPlaylistResult:
        playlist = await self._playlists.get_playlist(playlist_id)
        if not playlist.tracks:
            logger.info("playlist.play_skipped playlist_id=%s reason=empty", playlist.id)
            return PlayPlaylistResult(playlist_id, 0, EMPTY_MESSAGE)

        logger.info(
            "playlist.play_started playlist_id=%s tracks=%d",
            playlist.id,
            len(playlist.tracks),
        )
        await self._publish_track_events(playlist)
        logger.info(
            "playlist.play_published playlist_id=%s events=%d",
            playlist.id,
            len(playlist.tracks),
        )
        return PlayPlaylistResult(playlist_id, len(playlist.tracks), PLAYING_MESSAGE)

    async def _publish_track_events(self, playlist: Playlist) -> None:
        played_at = self._clock.now()
        for position, track in enumerate(playlist.tracks):
            event = TrackPlayedEvent(
                playlist_id=playlist.id,  # type: ignore[arg-type]
                track_id=track.id,  # type: ignore[arg-type]
                track_title=track.title,
                artist=track.artist,
                position=position,
                played_at=played_at,
                event_id=self._event_id_factory(),
            )
            try:
                await self._publisher.publish(event)
            except Exception as exc:
                logger.error(
                    "playlist.publish_failed playlist_id=%s track_id=%s position=%d exc=%r",
                    playlist.id,
                    track.id,
                    position,
                    exc,
                )
                raise TrackPublishError(track.id, position, exc) from exc  # type: ignore[arg-type]
            logger.debug(
                "playlist.track_published track=%r artist=%r position=%d",
                track.title,
                track.artist,
                position,
            )


__all__ = ["PlayPlaylistResult", "PlaylistPlayService", "TrackPublishError"]
