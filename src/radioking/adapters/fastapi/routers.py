"""FastAPI adapter – playlist and health routers."""
from __future__ import annotations

import logging
from typing import Annotated, Awaitable, Callable

from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse

from radioking.adapters.fastapi.deps import error_responses
from radioking.adapters.fastapi.schemas import (
    PlaylistCreateRequest,
    PlaylistResponse,
    PlayPlaylistResponse,
    TrackPlayResponse,
)
from radioking.application.history import TrackPlayService
from radioking.application.playback import PlaylistPlayService
from radioking.application.playlists import PlaylistService
from radioking.kernel.security import SecurityContext

logger = logging.getLogger(__name__)

ReadinessCheck = Callable[[], Awaitable[bool]]

# Ids are SQLite INTEGERs; larger values cannot name a row.
PlaylistId = Annotated[int, Path(le=2**63 - 1)]


def _requested_by() -> str:
    principal = SecurityContext.get_current()
    return principal.subject if principal is not None else "anonymous"


def PlaylistRouter(
    playlists: PlaylistService,
    player: PlaylistPlayService,
    history: TrackPlayService,
) -> APIRouter:
    """Return the ``/playlists`` router bound to the given services."""
    router = APIRouter(prefix="/playlists", tags=["playlists"])

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=PlaylistResponse,
        responses=error_responses(400, 401, 500),
    )
    async def create_playlist(body: PlaylistCreateRequest) -> PlaylistResponse:
        created = await playlists.create_playlist(body.to_domain())
        return PlaylistResponse.model_validate(created)

    @router.get("", response_model=list[PlaylistResponse], responses=error_responses(401, 500))
    async def list_playlists() -> list[PlaylistResponse]:
        return [PlaylistResponse.model_validate(p) for p in await playlists.list_playlists()]

    @router.get(
        "/{playlist_id}",
        response_model=PlaylistResponse,
        responses=error_responses(400, 401, 404, 500),
    )
    async def get_playlist(playlist_id: PlaylistId) -> PlaylistResponse:
        return PlaylistResponse.model_validate(await playlists.get_playlist(playlist_id))

    @router.post(
        "/{playlist_id}/play",
        response_model=PlayPlaylistResponse,
        responses=error_responses(400, 401, 404, 500),
    )
    async def play_playlist(playlist_id: PlaylistId) -> PlayPlaylistResponse:
        logger.info("playlist.play_requested playlist_id=%d requested_by=%s", playlist_id, _requested_by())
        result = await player.play_playlist(playlist_id)
        return PlayPlaylistResponse.model_validate(result)

    @router.get(
        "/{playlist_id}/plays",
        response_model=list[TrackPlayResponse],
        responses=error_responses(400, 401, 404, 500),
    )
    async def list_playlist_plays(playlist_id: PlaylistId) -> list[TrackPlayResponse]:
        await playlists.get_playlist(playlist_id)
        plays = await history.get_playlist_plays(playlist_id)
        return [TrackPlayResponse.model_validate(p) for p in plays]

    return router


def FastAPIHealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
) -> APIRouter:
    """Return a liveness + readiness router.

    Liveness is at ``{path}/live``; readiness at ``{path}/ready`` answers
    200 only when every check returns ``True``, otherwise 503.
    """
    router = APIRouter(tags=["ops"])
    checks = readiness_checks or []

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> JSONResponse:
        results: dict[str, bool] = {}
        for check in checks:
            name = getattr(check, "__name__", repr(check))
            try:
                ok = await check()
            except Exception as exc:
                logger.warning("health.check_failed check=%s exc=%r", name, exc)
                ok = False
            results[name] = ok

        all_ok = all(results.values())
        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["FastAPIHealthRouter", "PlaylistRouter", "ReadinessCheck"]
