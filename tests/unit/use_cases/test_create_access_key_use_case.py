"""
Unit tests for CreateAccessKeyUseCase
"""
import re
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.access_keys import CreateAccessKeyUseCase, generate_access_key_token
from src.domain.base import utcnow
from src.domain.entities import AccessKey, AdminRole


@pytest.mark.asyncio
async def test_issue_president_key(mock_uow):
    """A President key valid for one day starts unused"""
    dean_session_id = uuid4()
    before = utcnow()

    result = await CreateAccessKeyUseCase(mock_uow).execute(
        "President", 1, issued_by_session_id=dean_session_id
    )

    assert result.is_ok()
    key = result.value
    assert key.role == "President"
    assert key.is_used is False
    assert key.issued_by == "Dean"
    assert key.token.startswith("CSA-PRE-")
    assert before + timedelta(days=1) <= key.expires_at <= utcnow() + timedelta(days=1)

    stored = mock_uow.access_keys.create.call_args.args[0]
    assert isinstance(stored, AccessKey)
    assert stored.token == key.token
    assert stored.role == AdminRole.president

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "access_key_issued"
    assert audit.session_id == dean_session_id
    assert key.token not in str(audit.event_metadata)

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_validity_days_is_not_hardcoded(mock_uow):
    result = await CreateAccessKeyUseCase(mock_uow).execute("Media Head", 7)

    assert result.is_ok()
    key = result.value
    assert key.expires_at - key.created_at == timedelta(days=7)


@pytest.mark.asyncio
async def test_unknown_role_rejected(mock_uow):
    result = await CreateAccessKeyUseCase(mock_uow).execute("Treasurer", 1)

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.access_keys.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("validity_days", [0, -3])
async def test_non_positive_validity_rejected(mock_uow, validity_days):
    result = await CreateAccessKeyUseCase(mock_uow).execute("President", validity_days)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.access_keys.create.assert_not_called()


def test_tokens_are_random_and_role_prefixed():
    tokens = {generate_access_key_token(AdminRole.vice_president) for _ in range(50)}

    assert len(tokens) == 50
    for token in tokens:
        assert re.fullmatch(r"CSA-VIC-[0-9A-F]{32}", token)
