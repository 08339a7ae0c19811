from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.appointment_status import AppointmentStatus
from src.infrastructure.db.base import Base
from src.infrastructure.db.types import value_enum


class AppointmentORM(Base):
    __tablename__ = "appointments"
    __table_args__ = (
        Index("idx_appointments_pet_date", "pet_id", "date"),
        Index("idx_appointments_customer_date", "customer_id", "date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    pet_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), ForeignKey("pets.id"), nullable=False)
    service_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("services.id"), nullable=False
    )
    customer_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[AppointmentStatus] = mapped_column(
        value_enum(AppointmentStatus), nullable=False, default=AppointmentStatus.PENDING
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
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
