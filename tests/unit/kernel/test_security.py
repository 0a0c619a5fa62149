"""Unit tests for Principal and SecurityContext."""

from __future__ import annotations

import asyncio

import pytest

from radioking.kernel.errors import UnauthorizedError
from radioking.kernel.security import Principal, SecurityContext


class TestPrincipal:
    def test_has_role(self) -> None:
        principal = Principal(subject="u-1", roles=frozenset({"dj"}))
        assert principal.has_role("dj")
        assert not principal.has_role("admin")

    def test_defaults(self) -> None:
        principal = Principal(subject="u-1")
        assert principal.username is None
        assert principal.roles == frozenset()
        assert principal.claims == {}


class TestSecurityContext:
    def teardown_method(self) -> None:
        SecurityContext.clear()

    def test_set_and_get(self) -> None:
        principal = Principal(subject="u-1")
        SecurityContext.set_current(principal)
        assert SecurityContext.get_current() is principal

    def test_require_without_principal_raises(self) -> None:
        SecurityContext.clear()
        with pytest.raises(UnauthorizedError):
            SecurityContext.require()

    def test_isolated_between_tasks(self) -> None:
        async def run() -> list[str | None]:
            async def worker(name: str) -> str | None:
                SecurityContext.set_current(Principal(subject=name))
                await asyncio.sleep(0)
                current = SecurityContext.get_current()
                return current.subject if current else None

            return list(await asyncio.gather(worker("a"), worker("b")))

        assert asyncio.run(run()) == ["a", "b"]
