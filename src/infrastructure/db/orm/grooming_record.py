from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base
from src.infrastructure.db.types import StringList


class GroomingRecordORM(Base):
    __tablename__ = "grooming_records"
    __table_args__ = (Index("idx_grooming_records_pet_session", "pet_id", "session_date"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    pet_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), ForeignKey("pets.id"), nullable=False)
    groomer_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    session_date: Mapped[date] = mapped_column(Date, nullable=False)
    services_performed: Mapped[list[str]] = mapped_column(StringList, nullable=False)
    products_used: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    hair_style: Mapped[str | None] = mapped_column(String(255), nullable=True)
    skin_condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    coat_condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    behavior_during_session: Mapped[str | None] = mapped_column(Text, nullable=True)
    observations: Mapped[str | None] = mapped_column(Text, nullable=True)
    recommendations: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    service_cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
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
