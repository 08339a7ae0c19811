from __future__ import annotations

from typing import TypeVar
from uuid import UUID

from sqlalchemy import Select, Update

from src.infrastructure.db.orm.pet import PetORM

StatementT = TypeVar("StatementT", Select, Update)


def active_only(stmt: StatementT) -> StatementT:
    """Restrict a statement over (or joined to) pets to active pets."""
    return stmt.where(PetORM.is_active.is_(True))


def owned_by(stmt: Select, owner_id: UUID | None, pet_fk) -> Select:
    """Scope a pet-child query to one owner's pets; None leaves it unscoped."""
    if owner_id is None:
        return stmt
    return stmt.join(PetORM, PetORM.id == pet_fk).where(PetORM.owner_id == owner_id)
