"""Kernel security – Principal."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity extracted from an identity-provider token."""
    subject: str
    username: str | None = None
    email: str | None = None
    roles: frozenset[str] = frozenset()
    claims: dict[str, Any] = dataclasses.field(default_factory=dict)

    def has_role(self, role: str) -> bool:
        return role in self.roles


__all__ = ["Principal"]
