from __future__ import annotations

import pytest

from tests.integration.http.helpers import API, create_pet


@pytest.mark.asyncio
async def test_health_is_public(client):
    response = await client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_requests_without_token_are_rejected(client, seeded_users):
    response = await client.get(f"{API}/pets")
    assert response.status_code == 401
    assert response.json()["code"] == "auth_error"

    response = await client.get(f"{API}/pets", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_returns_roles(client, auth_headers, seeded_users):
    response = await client.get(f"{API}/me", headers=auth_headers["admin"])
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == str(seeded_users["admin"])
    assert body["email"] == "admin@example.com"
    assert body["roles"] == ["ADMIN"]
    assert body["is_admin"] is True


@pytest.mark.asyncio
async def test_create_and_fetch_pet(client, auth_headers, seeded_users):
    pet = await create_pet(client, auth_headers["owner"], weight="12.50")
    assert pet["owner_id"] == str(seeded_users["owner"])
    assert pet["is_active"] is True
    assert pet["gender"] == "unknown"

    response = await client.get(f"{API}/pets/{pet['id']}", headers=auth_headers["owner"])
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Luna"
    assert body["owner"]["email"] == "owner@example.com"


@pytest.mark.asyncio
async def test_list_is_scoped_to_owner(client, auth_headers):
    await create_pet(client, auth_headers["owner"], name="Luna")
    await create_pet(client, auth_headers["owner"], name="Simba", species="cat")
    await create_pet(client, auth_headers["other"], name="Rocky")

    owner_view = await client.get(f"{API}/pets", headers=auth_headers["owner"])
    admin_view = await client.get(f"{API}/pets", headers=auth_headers["admin"])

    assert owner_view.status_code == 200
    assert owner_view.json()["total"] == 2
    assert {p["name"] for p in owner_view.json()["items"]} == {"Luna", "Simba"}
    assert admin_view.json()["total"] == 3

    paged = await client.get(f"{API}/pets?limit=1&offset=1", headers=auth_headers["owner"])
    assert paged.json()["pages"] == 2
    assert len(paged.json()["items"]) == 1

    bad = await client.get(f"{API}/pets?limit=0", headers=auth_headers["owner"])
    assert bad.status_code == 400


@pytest.mark.asyncio
async def test_other_users_pet_is_forbidden(client, auth_headers):
    pet = await create_pet(client, auth_headers["owner"])

    response = await client.get(f"{API}/pets/{pet['id']}", headers=auth_headers["other"])
    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"

    response = await client.patch(
        f"{API}/pets/{pet['id']}", json={"name": "Mine"}, headers=auth_headers["other"]
    )
    assert response.status_code == 403

    response = await client.get(f"{API}/pets/{pet['id']}", headers=auth_headers["admin"])
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_update_pet_partially(client, auth_headers):
    pet = await create_pet(client, auth_headers["owner"], color="brown")

    response = await client.patch(
        f"{API}/pets/{pet['id']}",
        json={"temperament": "friendly", "behavior_notes": ["loves treats"]},
        headers=auth_headers["owner"],
    )

    assert response.status_code == 200
    body = response.json()
    assert body["temperament"] == "friendly"
    assert body["behavior_notes"] == ["loves treats"]
    assert body["color"] == "brown"


@pytest.mark.asyncio
async def test_duplicate_microchip_conflicts(client, auth_headers):
    await create_pet(client, auth_headers["owner"], microchip_number="985112003456789")

    response = await client.post(
        f"{API}/pets",
        json={"name": "Twin", "species": "dog", "microchip_number": "985112003456789"},
        headers=auth_headers["other"],
    )

    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


@pytest.mark.asyncio
async def test_soft_delete_hides_pet(client, auth_headers):
    pet = await create_pet(client, auth_headers["owner"])

    response = await client.delete(f"{API}/pets/{pet['id']}", headers=auth_headers["owner"])
    assert response.status_code == 200
    assert response.json() == {"message": "Pet deleted successfully"}

    response = await client.get(f"{API}/pets/{pet['id']}", headers=auth_headers["owner"])
    assert response.status_code == 404
    listing = await client.get(f"{API}/pets", headers=auth_headers["owner"])
    assert listing.json()["total"] == 0


@pytest.mark.asyncio
async def test_malformed_pet_id_is_a_bad_request(client, auth_headers):
    response = await client.get(f"{API}/pets/not-a-uuid", headers=auth_headers["owner"])
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"
