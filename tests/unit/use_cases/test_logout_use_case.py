"""
Unit tests for LogoutUseCase
"""
import pytest

from src.api.utils.jwt import generate_session_jwt
from src.app.use_cases.auth import LogoutUseCase
from src.domain.entities import SessionKind
from tests.utils.factories import make_admin_session, make_dean_session


@pytest.mark.asyncio
async def test_logout_deactivates_own_session(mock_uow):
    session = make_admin_session()
    token = generate_session_jwt(session.id, "admin", "President", session.expires_at)

    result = await LogoutUseCase(mock_uow).execute(token, SessionKind.admin)

    assert result.is_ok()
    assert mock_uow.admin_sessions.deactivate.call_args.args[0] == session.id
    mock_uow.dean_sessions.deactivate.assert_not_called()
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "logout"
    assert audit.session_id == session.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_second_logout_is_quiet_success(mock_uow):
    session = make_dean_session()
    token = generate_session_jwt(session.id, "dean", "Dean", session.expires_at)
    mock_uow.dean_sessions.deactivate.return_value = False

    result = await LogoutUseCase(mock_uow).execute(token)

    assert result.is_ok()
    mock_uow.audit_events.create.assert_not_called()


@pytest.mark.asyncio
async def test_dean_token_on_admin_logout(mock_uow):
    session = make_dean_session()
    token = generate_session_jwt(session.id, "dean", "Dean", session.expires_at)

    result = await LogoutUseCase(mock_uow).execute(token, SessionKind.admin)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.dean_sessions.deactivate.assert_not_called()


@pytest.mark.asyncio
async def test_unreadable_token(mock_uow):
    result = await LogoutUseCase(mock_uow).execute("garbage")

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
