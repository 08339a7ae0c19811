from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from tests.integration.http.helpers import API, create_pet, create_service


def _in_days(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


async def _book(client, headers, pet_id, service_id, days=3):
    return await client.post(
        f"{API}/appointments",
        json={"pet_id": pet_id, "service_id": service_id, "date": _in_days(days)},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_book_and_manage_appointment(client, auth_headers, seeded_users):
    pet = await create_pet(client, auth_headers["owner"])
    service = await create_service(client, auth_headers["admin"])

    response = await _book(client, auth_headers["owner"], pet["id"], service["id"])
    assert response.status_code == 201, response.text
    appointment = response.json()
    assert appointment["status"] == "pending"
    assert appointment["customer_id"] == str(seeded_users["owner"])
    assert appointment["service_name"] == service["name"]

    own = await client.patch(
        f"{API}/appointments/{appointment['id']}",
        json={"status": "confirmed"},
        headers=auth_headers["owner"],
    )
    assert own.status_code == 403

    confirmed = await client.patch(
        f"{API}/appointments/{appointment['id']}",
        json={"status": "confirmed"},
        headers=auth_headers["admin"],
    )
    assert confirmed.json()["status"] == "confirmed"

    listing = await client.get(
        f"{API}/appointments?status=confirmed", headers=auth_headers["owner"]
    )
    assert listing.json()["total"] == 1
    stranger = await client.get(f"{API}/appointments", headers=auth_headers["other"])
    assert stranger.json()["total"] == 0
    hidden = await client.get(
        f"{API}/appointments/{appointment['id']}", headers=auth_headers["other"]
    )
    assert hidden.status_code == 403

    deleted = await client.delete(
        f"{API}/appointments/{appointment['id']}", headers=auth_headers["owner"]
    )
    assert deleted.status_code == 204


@pytest.mark.asyncio
async def test_booking_rules(client, auth_headers):
    pet = await create_pet(client, auth_headers["owner"])
    service = await create_service(client, auth_headers["admin"])
    retired = await create_service(client, auth_headers["admin"], name="Retired", is_active=False)

    past = await _book(client, auth_headers["owner"], pet["id"], service["id"], days=-1)
    assert past.status_code == 400

    not_mine = await _book(client, auth_headers["other"], pet["id"], service["id"])
    assert not_mine.status_code == 403

    inactive = await _book(client, auth_headers["owner"], pet["id"], retired["id"])
    assert inactive.status_code == 400


@pytest.mark.asyncio
async def test_referenced_service_cannot_be_deleted(client, auth_headers):
    pet = await create_pet(client, auth_headers["owner"])
    service = await create_service(client, auth_headers["admin"])
    booked = await _book(client, auth_headers["owner"], pet["id"], service["id"])
    assert booked.status_code == 201

    response = await client.delete(f"{API}/services/{service['id']}", headers=auth_headers["admin"])

    assert response.status_code == 409
