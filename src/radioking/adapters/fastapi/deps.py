"""FastAPI adapter – OpenAPI helpers shared by the routers."""
from __future__ import annotations

from radioking.adapters.fastapi.schemas import ErrorResponse

_STATUS_DESCRIPTIONS: dict[int, str] = {
    400: "Validation error or malformed playlist id",
    401: "Missing or invalid credentials",
    404: "Playlist not found",
    500: "Internal server error",
}


def error_responses(*codes: int) -> dict[int | str, dict[str, object]]:
    """Build a ``responses=`` mapping documenting ``{"error": ...}`` bodies.

    Usage::

        @router.get("/playlists/{playlist_id}", responses=error_responses(400, 404))
        async def get_playlist(...): ...
    """
    return {
        code: {"model": ErrorResponse, "description": _STATUS_DESCRIPTIONS.get(code, "Error")}
        for code in codes
    }


__all__ = ["error_responses"]
