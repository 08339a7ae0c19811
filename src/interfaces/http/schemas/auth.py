from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr

from src.domain.value_objects.role import Role


class MeResponse(BaseModel):
    user_id: UUID
    email: EmailStr
    full_name: str
    roles: list[Role]
    is_admin: bool
    claims: dict[str, Any]
