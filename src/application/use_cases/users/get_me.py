from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class MeResult:
    user_id: UUID
    email: str
    full_name: str
    roles: list[Role]
    is_admin: bool
    claims: dict[str, Any]


async def execute(
    *,
    principal: Principal,
    email: str,
    full_name: str,
    claims: dict[str, Any],
) -> MeResult:
    return MeResult(
        user_id=principal.user_id,
        email=email,
        full_name=full_name,
        roles=sorted(principal.roles, key=lambda role: role.value),
        is_admin=principal.is_admin(),
        claims=claims,
    )
