"""SQLAlchemy ORM rows – playlists, tracks, track_plays."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from radioking.adapters.sqlalchemy.mixins import TimestampMixin
from radioking.domain.models import (
    MAX_ARTIST_NAME_LENGTH,
    MAX_PLAYLIST_NAME_LENGTH,
    MAX_TRACK_TITLE_LENGTH,
)


class Base(DeclarativeBase):
    pass


class PlaylistRow(Base):
    __tablename__ = "playlists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_PLAYLIST_NAME_LENGTH), nullable=False)

    tracks: Mapped[list[TrackRow]] = relationship(
        back_populates="playlist",
        cascade="all, delete-orphan",
        order_by="TrackRow.id",
        lazy="selectin",
    )


class TrackRow(Base):
    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    playlist_id: Mapped[int] = mapped_column(
        ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(MAX_TRACK_TITLE_LENGTH), nullable=False)
    artist: Mapped[str] = mapped_column(String(MAX_ARTIST_NAME_LENGTH), nullable=False)

    playlist: Mapped[PlaylistRow] = relationship(back_populates="tracks")


class TrackPlayRow(TimestampMixin, Base):
    __tablename__ = "track_plays"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    playlist_id: Mapped[int] = mapped_column(
        ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id: Mapped[int] = mapped_column(
        ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    played_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )


__all__ = ["Base", "PlaylistRow", "TrackPlayRow", "TrackRow"]
