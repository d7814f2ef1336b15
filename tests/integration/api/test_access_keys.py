"""
Integration tests for access key issuance, listing and withdrawal
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest


@pytest.mark.asyncio
async def test_issue_key(client, dean_headers, test_data):
    # Act
    response = await client.post(
        "/auth/access-keys",
        json=test_data.get("access_key_requests")["media_head"],
        headers=dean_headers,
    )

    # Assert
    assert response.status_code == 201
    data = response.json()
    assert data["role"] == "Media Head"
    assert data["is_used"] is False
    assert data["issued_by"] == "Dean"
    assert data["token"].startswith("CSA-MED-")
    created_at = datetime.fromisoformat(data["created_at"])
    expires_at = datetime.fromisoformat(data["expires_at"])
    assert expires_at - created_at == timedelta(days=7)


@pytest.mark.asyncio
@pytest.mark.parametrize("payload_key", ["unknown_role", "zero_validity"])
async def test_rejected_requests(client, dean_headers, test_data, payload_key):
    response = await client.post(
        "/auth/access-keys",
        json=test_data.get("access_key_requests")[payload_key],
        headers=dean_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] in ("INVALID_ROLE", "VALIDATION_ERROR")


@pytest.mark.asyncio
async def test_issue_requires_dean(client, dean_config):
    response = await client.post(
        "/auth/access-keys", json={"role": "President", "validity_days": 1}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_shows_redemption_state(client, dean_headers, issue_access_key):
    spent = await issue_access_key(role="General Secretary")
    fresh = await issue_access_key(role="Media Head")
    await client.post("/auth/admin/login", json={"token": spent["token"]})

    response = await client.get("/auth/access-keys", headers=dean_headers)

    assert response.status_code == 200
    by_id = {k["id"]: k for k in response.json()["keys"]}
    assert by_id[spent["id"]]["is_used"] is True
    assert by_id[spent["id"]]["used_at"] is not None
    assert by_id[fresh["id"]]["is_used"] is False


@pytest.mark.asyncio
async def test_withdraw_unused_key(client, dean_headers, issue_access_key):
    issued = await issue_access_key()

    response = await client.delete(f"/auth/access-keys/{issued['id']}", headers=dean_headers)
    login = await client.post("/auth/admin/login", json={"token": issued["token"]})

    assert response.status_code == 200
    assert response.json()["status"] == "withdrawn"
    assert login.status_code == 401


@pytest.mark.asyncio
async def test_redeemed_key_cannot_be_withdrawn(client, dean_headers, issue_access_key):
    issued = await issue_access_key()
    await client.post("/auth/admin/login", json={"token": issued["token"]})

    response = await client.delete(f"/auth/access-keys/{issued['id']}", headers=dean_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ACCESS_KEY_ALREADY_USED"


@pytest.mark.asyncio
async def test_withdraw_unknown_key(client, dean_headers):
    response = await client.delete(f"/auth/access-keys/{uuid4()}", headers=dean_headers)

    assert response.status_code == 404
