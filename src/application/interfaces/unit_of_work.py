from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.appointments import AppointmentRepository
from src.application.interfaces.repositories.grooming_records import GroomingRecordRepository
from src.application.interfaces.repositories.medical_records import MedicalRecordRepository
from src.application.interfaces.repositories.pets import PetRepository
from src.application.interfaces.repositories.products import ProductRepository
from src.application.interfaces.repositories.services import ServiceRepository
from src.application.interfaces.repositories.users import UserRepository
from src.application.interfaces.repositories.vaccinations import VaccinationRepository


class UnitOfWork(Protocol):
    users: UserRepository
    pets: PetRepository
    medical_records: MedicalRecordRepository
    vaccinations: VaccinationRepository
    grooming_records: GroomingRecordRepository
    appointments: AppointmentRepository
    services: ServiceRepository
    products: ProductRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
