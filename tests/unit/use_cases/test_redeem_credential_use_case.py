"""
Unit tests for RedeemCredentialUseCase (single login box)
"""
from datetime import timedelta

import pytest

from src.app.use_cases.auth import RedeemCredentialUseCase, RequestContext
from src.domain.base import utcnow
from tests.utils.factories import MASTER_KEY, make_access_key, make_dean_config


@pytest.mark.asyncio
async def test_access_key_wins_first(mock_uow):
    key = make_access_key()
    mock_uow.access_keys.get_by_token.return_value = key
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await RedeemCredentialUseCase(mock_uow).execute(key.token, RequestContext())

    assert result.is_ok()
    assert result.value.kind == "admin"
    assert result.value.role == "President"
    mock_uow.dean_sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_falls_through_to_master_key(mock_uow):
    mock_uow.access_keys.get_by_token.return_value = None
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await RedeemCredentialUseCase(mock_uow).execute(MASTER_KEY, RequestContext())

    assert result.is_ok()
    assert result.value.kind == "dean"
    mock_uow.admin_sessions.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "key",
    [
        None,
        make_access_key(is_used=True),
        make_access_key(expires_at=utcnow() - timedelta(minutes=1)),
    ],
    ids=["unknown", "used", "expired"],
)
async def test_every_failure_reads_the_same(mock_uow, key):
    """Unknown, used and expired keys are indistinguishable on this path"""
    mock_uow.access_keys.get_by_token.return_value = key
    mock_uow.dean_config.get.return_value = make_dean_config()
    credential = key.token if key else "CSA-PRE-UNKNOWN"

    result = await RedeemCredentialUseCase(mock_uow).execute(credential, RequestContext())

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIAL"
    assert result.error.message == "Invalid access key"


@pytest.mark.asyncio
async def test_not_initialized_is_not_masked(mock_uow):
    mock_uow.access_keys.get_by_token.return_value = None
    mock_uow.dean_config.get.return_value = None

    result = await RedeemCredentialUseCase(mock_uow).execute("whatever", RequestContext())

    assert result.is_err()
    assert result.error.code == "NOT_INITIALIZED"
