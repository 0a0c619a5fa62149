"""FastAPI adapter – HTTP surface of the playlist service."""
from radioking.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from radioking.adapters.fastapi.middleware import (
    FastAPICorrelationIdMiddleware,
    FastAPISecurityMiddleware,
)
from radioking.adapters.fastapi.routers import FastAPIHealthRouter, PlaylistRouter

__all__ = [
    "FastAPICorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "FastAPISecurityMiddleware",
    "PlaylistRouter",
]
