from __future__ import annotations

from httpx import AsyncClient

API = "/api/v1"


async def create_pet(client: AsyncClient, headers: dict[str, str], **overrides) -> dict:
    payload = {"name": "Luna", "species": "dog", "breed": "Beagle", "birth_date": "2021-01-15"}
    payload.update(overrides)
    response = await client.post(f"{API}/pets", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def create_service(client: AsyncClient, headers: dict[str, str], **overrides) -> dict:
    payload = {
        "name": "Full grooming",
        "description": "Bath, haircut and nails",
        "price": "35.00",
        "duration_minutes": 90,
        "type": "grooming",
    }
    payload.update(overrides)
    response = await client.post(f"{API}/services", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
