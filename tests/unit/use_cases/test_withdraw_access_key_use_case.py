"""
Unit tests for WithdrawAccessKeyUseCase and ListAccessKeysUseCase
"""
from uuid import uuid4

import pytest

from src.app.use_cases.access_keys import ListAccessKeysUseCase, WithdrawAccessKeyUseCase
from tests.utils.factories import make_access_key


@pytest.mark.asyncio
async def test_withdraw_unused_key(mock_uow):
    key = make_access_key()
    mock_uow.access_keys.get_by_id.return_value = key

    result = await WithdrawAccessKeyUseCase(mock_uow).execute(key.id)

    assert result.is_ok()
    assert result.value.key_id == str(key.id)
    mock_uow.access_keys.delete.assert_called_once_with(key)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_redeemed_key_is_kept(mock_uow):
    mock_uow.access_keys.get_by_id.return_value = make_access_key(is_used=True)

    result = await WithdrawAccessKeyUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "ACCESS_KEY_ALREADY_USED"
    mock_uow.access_keys.delete.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_key(mock_uow):
    mock_uow.access_keys.get_by_id.return_value = None

    result = await WithdrawAccessKeyUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "ACCESS_KEY_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_keys(mock_uow):
    keys = [make_access_key(token="CSA-MED-AAAA"), make_access_key(token="CSA-PRE-BBBB", is_used=True)]
    mock_uow.access_keys.list_all.return_value = keys

    result = await ListAccessKeysUseCase(mock_uow).execute()

    assert result.is_ok()
    listed = result.value.keys
    assert [k.token for k in listed] == ["CSA-MED-AAAA", "CSA-PRE-BBBB"]
    assert listed[1].is_used is True
