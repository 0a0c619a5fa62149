"""FastAPI adapter – request / response bodies."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from radioking.domain.models import (
    MAX_ARTIST_NAME_LENGTH,
    MAX_PLAYLIST_NAME_LENGTH,
    MAX_TRACK_TITLE_LENGTH,
    MAX_TRACKS_PER_PLAYLIST,
    Playlist,
    Track,
)


class TrackCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=MAX_TRACK_TITLE_LENGTH)
    artist: str = Field(min_length=1, max_length=MAX_ARTIST_NAME_LENGTH)


class PlaylistCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_PLAYLIST_NAME_LENGTH)
    tracks: list[TrackCreateRequest] = Field(default_factory=list, max_length=MAX_TRACKS_PER_PLAYLIST)

    def to_domain(self) -> Playlist:
        return Playlist(
            name=self.name,
            tracks=[Track(title=t.title, artist=t.artist) for t in self.tracks],
        )


class TrackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    artist: str


class PlaylistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    tracks: list[TrackResponse]


class PlayPlaylistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    playlist_id: int
    tracks_count: int
    message: str


class TrackPlayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    playlist_id: int
    track_id: int
    position: int
    played_at: datetime
    created_at: datetime | None = None


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "ErrorResponse",
    "PlayPlaylistResponse",
    "PlaylistCreateRequest",
    "PlaylistResponse",
    "TrackCreateRequest",
    "TrackPlayResponse",
    "TrackResponse",
]
