"""
Unit tests for VerifyRecoveryChallengeUseCase
"""
from datetime import timedelta

import pytest

from src.app.services.credential_hasher import hash_token
from src.app.use_cases.recovery import VerifyRecoveryChallengeUseCase
from src.domain.base import utcnow
from src.domain.entities import RecoveryMethod, ResetPurpose, ResetToken
from tests.utils.factories import BACKUP_CODE, SECURITY_ANSWER, make_dean_config


@pytest.mark.asyncio
async def test_answer_is_trimmed_and_case_insensitive(mock_uow):
    mock_uow.dean_config.get.return_value = make_dean_config(key_version=3)

    result = await VerifyRecoveryChallengeUseCase(mock_uow).execute(
        RecoveryMethod.question, f"  {SECURITY_ANSWER.upper()} "
    )

    assert result.is_ok()
    plain = result.value.reset_token

    stored = mock_uow.reset_tokens.create.call_args.args[0]
    assert isinstance(stored, ResetToken)
    # Only the hash is persisted
    assert stored.token_hash == hash_token(plain)
    assert stored.token_hash != plain
    assert stored.purpose == ResetPurpose.master_key_reset
    assert stored.key_version == 3
    assert stored.used is False
    assert stored.expires_at - stored.issued_at == timedelta(minutes=10)
    assert stored.expires_at > utcnow()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_backup_code(mock_uow):
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await VerifyRecoveryChallengeUseCase(mock_uow).execute(
        RecoveryMethod.backup, BACKUP_CODE
    )

    assert result.is_ok()
    mock_uow.reset_tokens.create.assert_called_once()


@pytest.mark.asyncio
async def test_backup_code_is_case_sensitive(mock_uow):
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await VerifyRecoveryChallengeUseCase(mock_uow).execute(
        RecoveryMethod.backup, BACKUP_CODE.lower()
    )

    assert result.is_err()
    assert result.error.code == "INCORRECT_ANSWER"


@pytest.mark.asyncio
async def test_wrong_answer_issues_nothing(mock_uow):
    mock_uow.dean_config.get.return_value = make_dean_config()

    result = await VerifyRecoveryChallengeUseCase(mock_uow).execute(
        RecoveryMethod.question, "Rex"
    )

    assert result.is_err()
    assert result.error.code == "INCORRECT_ANSWER"
    mock_uow.reset_tokens.create.assert_not_called()
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "recovery_failed"
    assert "Rex" not in str(audit.event_metadata)


@pytest.mark.asyncio
async def test_blank_answer(mock_uow):
    result = await VerifyRecoveryChallengeUseCase(mock_uow).execute(RecoveryMethod.question, "   ")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.dean_config.get.assert_not_called()
