from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=False, future=True)
    if engine.dialect.name == "sqlite":
        # SQLite ignores foreign keys unless asked per connection
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._clear_repositories()

    def _clear_repositories(self) -> None:
        self.users = None
        self.pets = None
        self.medical_records = None
        self.vaccinations = None
        self.grooming_records = None
        self.appointments = None
        self.services = None
        self.products = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.appointments_sqlalchemy import (
            AppointmentsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.grooming_records_sqlalchemy import (
            GroomingRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.medical_records_sqlalchemy import (
            MedicalRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.pets_sqlalchemy import PetsSQLAlchemyRepository
        from src.infrastructure.repos.products_sqlalchemy import ProductsSQLAlchemyRepository
        from src.infrastructure.repos.services_sqlalchemy import ServicesSQLAlchemyRepository
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository
        from src.infrastructure.repos.vaccinations_sqlalchemy import (
            VaccinationsSQLAlchemyRepository,
        )

        self.users = UsersSQLAlchemyRepository(self.session)
        self.pets = PetsSQLAlchemyRepository(self.session)
        self.medical_records = MedicalRecordsSQLAlchemyRepository(self.session)
        self.vaccinations = VaccinationsSQLAlchemyRepository(self.session)
        self.grooming_records = GroomingRecordsSQLAlchemyRepository(self.session)
        self.appointments = AppointmentsSQLAlchemyRepository(self.session)
        self.services = ServicesSQLAlchemyRepository(self.session)
        self.products = ProductsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._clear_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
