"""SQLAlchemy adapter – async engine, ORM rows and repositories."""
from radioking.adapters.sqlalchemy.models import Base, PlaylistRow, TrackPlayRow, TrackRow
from radioking.adapters.sqlalchemy.repositories import (
    SqlAlchemyPlaylistRepository,
    SqlAlchemyTrackPlayRepository,
)
from radioking.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "Base",
    "PlaylistRow",
    "SqlAlchemyPlaylistRepository",
    "SqlAlchemySessionFactory",
    "SqlAlchemyTrackPlayRepository",
    "TrackPlayRow",
    "TrackRow",
]
