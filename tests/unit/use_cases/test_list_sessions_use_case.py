"""
Unit tests for ListSessionsUseCase
"""
from datetime import timedelta

import pytest

from src.app.use_cases.sessions import ListSessionsUseCase
from src.domain.base import utcnow
from src.domain.entities import AdminRole
from tests.utils.factories import make_admin_session, make_dean_session


@pytest.mark.asyncio
async def test_merged_newest_first(mock_uow):
    now = utcnow()
    oldest = make_admin_session(role=AdminRole.general_secretary, created_at=now - timedelta(hours=2))
    middle = make_dean_session(created_at=now - timedelta(hours=1))
    newest = make_admin_session(is_active=False, created_at=now)
    mock_uow.admin_sessions.list_all.return_value = [newest, oldest]
    mock_uow.dean_sessions.list_all.return_value = [middle]

    result = await ListSessionsUseCase(mock_uow).execute()

    assert result.is_ok()
    sessions = result.value.sessions
    assert [s.id for s in sessions] == [str(newest.id), str(middle.id), str(oldest.id)]
    assert [s.kind for s in sessions] == ["admin", "dean", "admin"]
    assert sessions[1].role == "Dean"
    assert sessions[2].role == "General Secretary"
    assert sessions[0].is_active is False


@pytest.mark.asyncio
async def test_empty_registry(mock_uow):
    result = await ListSessionsUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.sessions == []
