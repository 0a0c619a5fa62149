"""Play-history recording and queries."""
from radioking.application.history.service import TrackPlayService

__all__ = ["TrackPlayService"]
