from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.service import Service


class ServiceRepository(Protocol):
    async def add(self, service: Service) -> Service: ...

    async def get(self, service_id: UUID) -> Service | None: ...

    async def get_by_name(self, name: str) -> Service | None: ...

    async def list(
        self, *, active_only: bool = True, limit: int | None = None, offset: int = 0
    ) -> list[Service]: ...

    async def count(self, *, active_only: bool = True) -> int: ...

    async def update(self, service_id: UUID, data: dict) -> Service | None: ...

    async def delete(self, service_id: UUID) -> bool: ...
