from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.value_objects.role import Role


@dataclass(frozen=True, slots=True)
class Principal:
    """The authenticated actor behind a request."""

    user_id: UUID
    roles: frozenset[Role] = field(default_factory=lambda: frozenset({Role.USER}))

    def is_admin(self) -> bool:
        return any(role.is_elevated() for role in self.roles)
