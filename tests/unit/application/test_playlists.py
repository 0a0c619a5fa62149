"""Unit tests for PlaylistService (create / list / get with validation)."""

from __future__ import annotations

import asyncio

import pytest

from radioking.application.playlists import PlaylistService
from radioking.domain.models import Playlist, Track
from radioking.kernel.errors import InternalError, NotFoundError, ValidationError
from radioking.testing.fakes import InMemoryPlaylistRepository


def _service() -> tuple[PlaylistService, InMemoryPlaylistRepository]:
    repo = InMemoryPlaylistRepository()
    return PlaylistService(repo), repo


def _road_trip() -> Playlist:
    return Playlist(
        name="Road Trip",
        tracks=[
            Track(title="Highway to Hell", artist="AC/DC"),
            Track(title="Born to Be Wild", artist="Steppenwolf"),
        ],
    )


# ---------------------------------------------------------------------------
# create_playlist
# ---------------------------------------------------------------------------


class TestCreatePlaylist:
    def test_assigns_ids(self) -> None:
        service, _ = _service()
        created = asyncio.run(service.create_playlist(_road_trip()))
        assert created.id == 1
        assert [t.id for t in created.tracks] == [1, 2]
        assert all(t.playlist_id == 1 for t in created.tracks)

    def test_empty_track_list_is_allowed(self) -> None:
        service, _ = _service()
        created = asyncio.run(service.create_playlist(Playlist(name="Silence")))
        assert created.tracks == []

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name: str) -> None:
        service, _ = _service()
        with pytest.raises(ValidationError, match="playlist name cannot be empty"):
            asyncio.run(service.create_playlist(Playlist(name=name)))

    def test_name_at_limit_accepted(self) -> None:
        service, _ = _service()
        created = asyncio.run(service.create_playlist(Playlist(name="x" * 255)))
        assert len(created.name) == 255

    def test_name_too_long_rejected(self) -> None:
        service, _ = _service()
        with pytest.raises(ValidationError, match="playlist name too long"):
            asyncio.run(service.create_playlist(Playlist(name="x" * 256)))

    def test_hundred_tracks_accepted(self) -> None:
        service, _ = _service()
        tracks = [Track(title=f"t{i}", artist="a") for i in range(100)]
        created = asyncio.run(service.create_playlist(Playlist(name="Big", tracks=tracks)))
        assert len(created.tracks) == 100

    def test_too_many_tracks_rejected(self) -> None:
        service, _ = _service()
        tracks = [Track(title=f"t{i}", artist="a") for i in range(101)]
        with pytest.raises(ValidationError, match="more than 100 tracks"):
            asyncio.run(service.create_playlist(Playlist(name="Big", tracks=tracks)))

    def test_invalid_track_reports_one_based_index(self) -> None:
        service, _ = _service()
        playlist = Playlist(
            name="Mixed",
            tracks=[Track(title="ok", artist="ok"), Track(title=" ", artist="ok")],
        )
        with pytest.raises(ValidationError) as excinfo:
            asyncio.run(service.create_playlist(playlist))
        assert str(excinfo.value) == "track 2 invalid: track title cannot be empty"
        assert excinfo.value.errors == [{"track": 2, "message": "track title cannot be empty"}]

    @pytest.mark.parametrize(
        ("track", "message"),
        [
            (Track(title="t", artist=""), "track artist cannot be empty"),
            (Track(title="x" * 256, artist="a"), "track title too long"),
            (Track(title="t", artist="x" * 256), "artist name too long"),
        ],
    )
    def test_track_field_rules(self, track: Track, message: str) -> None:
        service, _ = _service()
        with pytest.raises(ValidationError, match=message):
            asyncio.run(service.create_playlist(Playlist(name="p", tracks=[track])))

    def test_invalid_playlist_is_not_stored(self) -> None:
        service, repo = _service()
        with pytest.raises(ValidationError):
            asyncio.run(service.create_playlist(Playlist(name="")))
        assert asyncio.run(repo.get_all()) == []

    def test_store_failure_wrapped(self) -> None:
        service, repo = _service()
        repo.fail_with = RuntimeError("disk full")
        with pytest.raises(InternalError) as excinfo:
            asyncio.run(service.create_playlist(_road_trip()))
        assert excinfo.value.message == "failed to create playlist"
        assert isinstance(excinfo.value.__cause__, RuntimeError)


# ---------------------------------------------------------------------------
# list_playlists / get_playlist
# ---------------------------------------------------------------------------


class TestQueries:
    def test_list_returns_all(self) -> None:
        service, _ = _service()

        async def run() -> list[Playlist]:
            await service.create_playlist(_road_trip())
            await service.create_playlist(Playlist(name="Chill"))
            return await service.list_playlists()

        assert [p.name for p in asyncio.run(run())] == ["Road Trip", "Chill"]

    def test_get_by_id(self) -> None:
        service, _ = _service()

        async def run() -> Playlist:
            created = await service.create_playlist(_road_trip())
            return await service.get_playlist(created.id)  # type: ignore[arg-type]

        fetched = asyncio.run(run())
        assert fetched.name == "Road Trip"
        assert [t.title for t in fetched.tracks] == ["Highway to Hell", "Born to Be Wild"]

    @pytest.mark.parametrize("playlist_id", [0, -1])
    def test_non_positive_id_rejected(self, playlist_id: int) -> None:
        service, _ = _service()
        with pytest.raises(ValidationError, match="invalid playlist ID"):
            asyncio.run(service.get_playlist(playlist_id))

    def test_missing_playlist_not_found(self) -> None:
        service, _ = _service()
        with pytest.raises(NotFoundError):
            asyncio.run(service.get_playlist(999))

    def test_list_store_failure_wrapped(self) -> None:
        service, repo = _service()
        repo.fail_with = RuntimeError("gone")
        with pytest.raises(InternalError, match="failed to list playlists"):
            asyncio.run(service.list_playlists())

    def test_get_store_failure_wrapped(self) -> None:
        service, repo = _service()
        repo.fail_with = RuntimeError("gone")
        with pytest.raises(InternalError, match="failed to get playlist"):
            asyncio.run(service.get_playlist(1))
