from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class User:
    id: UUID
    email: str
    full_name: str
    roles: list[Role] = field(default_factory=lambda: [Role.USER])
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        email: str,
        full_name: str,
        *,
        roles: list[Role] | None = None,
        is_active: bool = True,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            email=email.strip().lower(),
            full_name=full_name.strip(),
            roles=list(roles or [Role.USER]),
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )

    def to_principal(self) -> Principal:
        return Principal(user_id=self.id, roles=frozenset(self.roles))


@dataclass(frozen=True, slots=True)
class OwnerSummary:
    id: UUID
    email: str
    full_name: str
