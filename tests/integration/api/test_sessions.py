"""
Integration tests for the Dean session registry
"""
from uuid import uuid4

import pytest


@pytest.mark.asyncio
async def test_registry_lists_both_kinds(client, dean_headers, issue_access_key):
    issued = await issue_access_key(role="General Secretary")
    await client.post("/auth/admin/login", json={"token": issued["token"]})

    response = await client.get("/auth/dean/sessions", headers=dean_headers)

    assert response.status_code == 200
    sessions = response.json()["sessions"]
    assert {s["kind"] for s in sessions} == {"admin", "dean"}
    admin = next(s for s in sessions if s["kind"] == "admin")
    assert admin["role"] == "General Secretary"
    assert admin["access_key_token"] == issued["token"]
    assert admin["device_info"] == "Mozilla/5.0 (pytest)"


@pytest.mark.asyncio
async def test_revoke_is_idempotent(client, dean_headers, issue_access_key):
    # Arrange
    issued = await issue_access_key()
    login = (await client.post("/auth/admin/login", json={"token": issued["token"]})).json()
    admin_headers = {"Authorization": f"Bearer {login['session_token']}"}
    url = f"/auth/dean/sessions/{login['session_id']}/revoke"

    # Act
    first = await client.post(url, json={"kind": "admin"}, headers=dean_headers)
    second = await client.post(url, json={"kind": "admin"}, headers=dean_headers)

    # Assert
    assert first.status_code == 200
    assert first.json()["revoked"] is True
    assert second.status_code == 200
    assert second.json()["revoked"] is False
    assert second.json()["is_active"] is False

    verify = await client.get("/auth/admin/verify", headers=admin_headers)
    assert verify.json()["valid"] is False

    # The originating key stays spent
    relogin = await client.post("/auth/admin/login", json={"token": issued["token"]})
    assert relogin.status_code == 409


@pytest.mark.asyncio
async def test_revoked_dean_session_loses_console(client, dean_headers, test_data):
    other = await client.post(
        "/auth/dean/login", json={"master_key": test_data.get("dean")["master_key"]}
    )
    other_headers = {"Authorization": f"Bearer {other.json()['session_token']}"}

    await client.post(
        f"/auth/dean/sessions/{other.json()['session_id']}/revoke",
        json={"kind": "dean"},
        headers=dean_headers,
    )
    response = await client.get("/auth/dean/sessions", headers=other_headers)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_revoke_unknown_session(client, dean_headers):
    response = await client.post(
        f"/auth/dean/sessions/{uuid4()}/revoke", json={"kind": "admin"}, headers=dean_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"
