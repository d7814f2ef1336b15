"""
Unit tests for DeanLoginUseCase
"""
import pytest

from src.app.use_cases.auth import DeanLoginUseCase, RequestContext
from src.domain.entities import DeanSession
from tests.utils.factories import MASTER_KEY, make_dean_config


@pytest.mark.asyncio
async def test_master_key_opens_dean_session(mock_uow):
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await DeanLoginUseCase(mock_uow).execute(
        MASTER_KEY, RequestContext(device_info="Firefox", ip_address="10.0.0.1")
    )

    assert result.is_ok()
    assert result.value.kind == "dean"
    assert result.value.role == "Dean"

    session = mock_uow.dean_sessions.create.call_args.args[0]
    assert isinstance(session, DeanSession)
    assert session.device_info == "Firefox"
    assert str(session.id) == result.value.session_id

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "dean_login"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_master_key(mock_uow):
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await DeanLoginUseCase(mock_uow).execute("not-the-key", RequestContext())

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIAL"
    mock_uow.dean_sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unseeded_system(mock_uow):
    mock_uow.dean_config.get.return_value = None

    result = await DeanLoginUseCase(mock_uow).execute(MASTER_KEY, RequestContext())

    assert result.is_err()
    assert result.error.code == "NOT_INITIALIZED"
