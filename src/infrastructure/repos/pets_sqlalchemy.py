from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.pets import PetRepository
from src.domain.models.pet import Pet
from src.domain.models.user import OwnerSummary
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.pet import PetORM
from src.infrastructure.db.orm.user import UserORM
from src.infrastructure.db.queries import active_only
from src.utils.datetime_tz import to_utc, utcnow

_MICROCHIP_TAKEN = {"duplicate_value": "A pet with that microchip number already exists"}


class PetsSQLAlchemyRepository(PetRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PetORM, owner: UserORM | None = None) -> Pet:
        return Pet(
            id=orm.id,
            owner_id=orm.owner_id,
            name=orm.name,
            species=orm.species,
            breed=orm.breed,
            birth_date=orm.birth_date,
            gender=orm.gender,
            color=orm.color,
            weight=orm.weight,
            microchip_number=orm.microchip_number,
            temperament=orm.temperament,
            behavior_notes=list(orm.behavior_notes or []),
            general_notes=orm.general_notes,
            is_active=orm.is_active,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
            owner=(
                OwnerSummary(id=owner.id, email=owner.email, full_name=owner.full_name)
                if owner is not None
                else None
            ),
        )

    async def add(self, pet: Pet) -> Pet:
        orm = PetORM(
            id=pet.id,
            owner_id=pet.owner_id,
            name=pet.name,
            species=pet.species,
            breed=pet.breed,
            birth_date=pet.birth_date,
            gender=pet.gender,
            color=pet.color,
            weight=pet.weight,
            microchip_number=pet.microchip_number,
            temperament=pet.temperament,
            behavior_notes=pet.behavior_notes,
            general_notes=pet.general_notes,
            is_active=pet.is_active,
            created_at=pet.created_at,
            updated_at=pet.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="pet", messages=_MICROCHIP_TAKEN) from exc
        return self._to_domain(orm)

    async def get(
        self,
        pet_id: UUID,
        *,
        load_owner: bool = False,
        include_inactive: bool = False,
    ) -> Pet | None:
        if load_owner:
            stmt = (
                select(PetORM, UserORM)
                .join(UserORM, UserORM.id == PetORM.owner_id)
                .where(PetORM.id == pet_id)
            )
        else:
            stmt = select(PetORM).where(PetORM.id == pet_id)
        if not include_inactive:
            stmt = active_only(stmt)
        result = await self.session.execute(stmt)
        if load_owner:
            row = result.one_or_none()
            return self._to_domain(row[0], row[1]) if row else None
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        owner_id: UUID | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Pet]:
        stmt = active_only(select(PetORM))
        if owner_id is not None:
            stmt = stmt.where(PetORM.owner_id == owner_id)
        stmt = stmt.order_by(PetORM.created_at.desc(), PetORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(self, *, owner_id: UUID | None = None) -> int:
        stmt = active_only(select(func.count(PetORM.id)))
        if owner_id is not None:
            stmt = stmt.where(PetORM.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def update(self, pet_id: UUID, data: dict) -> Pet | None:
        values = {**data, "updated_at": utcnow()}
        stmt = active_only(
            update(PetORM).where(PetORM.id == pet_id).values(**values).returning(PetORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="pet", messages=_MICROCHIP_TAKEN) from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def deactivate(self, pet_id: UUID) -> bool:
        stmt = active_only(
            update(PetORM)
            .where(PetORM.id == pet_id)
            .values(is_active=False, updated_at=utcnow())
            .returning(PetORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
