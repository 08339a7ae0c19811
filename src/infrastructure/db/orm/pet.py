from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.pet_traits import PetGender, PetSpecies, PetTemperament
from src.infrastructure.db.base import Base
from src.infrastructure.db.types import StringList, value_enum


class PetORM(Base):
    __tablename__ = "pets"
    __table_args__ = (
        UniqueConstraint("microchip_number", name="ux_pets_microchip_number"),
        Index("idx_pets_owner_active", "owner_id", "is_active", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    species: Mapped[PetSpecies] = mapped_column(value_enum(PetSpecies), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(255), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[PetGender] = mapped_column(
        value_enum(PetGender), nullable=False, default=PetGender.UNKNOWN
    )
    color: Mapped[str | None] = mapped_column(String(100), nullable=True)
    weight: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    microchip_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    temperament: Mapped[PetTemperament] = mapped_column(
        value_enum(PetTemperament), nullable=False, default=PetTemperament.UNKNOWN
    )
    behavior_notes: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    general_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
