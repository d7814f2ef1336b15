"""
Verify Recovery Challenge Use Case

First half of the master key recovery flow: a correct security answer or
backup code buys a short-lived reset token.
"""

import logging
import secrets
from datetime import timedelta

from config import ApplicationConfig
from src.libs.result import Error, Result, Return
from src.app.services.credential_hasher import hash_token, normalize_answer, verify_secret
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    AuditActor,
    AuditEvent,
    RecoveryMethod,
    ResetPurpose,
    ResetToken,
)
from .dtos import RecoveryChallengeResponse

logger = logging.getLogger(__name__)


class VerifyRecoveryChallengeUseCase:
    """
    Use case for the question/backup branches of recovery.

    Business Rules:
    - question: answer is trimmed and lower-cased before the bcrypt check
    - backup: code is trimmed, case-sensitive
    - Mismatch -> INCORRECT_ANSWER, nothing is stored
    - Match -> single-use reset token (32 random bytes, stored as SHA-256),
      valid RESET_TOKEN_TTL_MINUTES and bound to the current key_version
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, method: RecoveryMethod, response: str
    ) -> Result[RecoveryChallengeResponse]:
        """
        Execute verify recovery challenge use case.

        Args:
            method: RecoveryMethod.question or RecoveryMethod.backup
            response: Security answer or backup code as typed

        Returns:
            Result with the plain reset token, or Error
        """
        if not response or not response.strip():
            return Return.err(Error("VALIDATION_ERROR", "An answer is required"))

        async with self.uow:
            config = await self.uow.dean_config.get()
            if config is None:
                return Return.err(Error("NOT_INITIALIZED", "System not initialized"))

            if method == RecoveryMethod.question:
                matched = verify_secret(normalize_answer(response), config.security_answer_hash)
                failure = Error("INCORRECT_ANSWER", "Incorrect answer")
            else:
                matched = verify_secret(response.strip(), config.backup_code_hash)
                failure = Error("INCORRECT_ANSWER", "Invalid backup code")

            if not matched:
                logger.warning("Failed recovery attempt via %s", method.value)
                audit = AuditEvent(
                    actor=AuditActor.anonymous,
                    action="recovery_failed",
                    event_metadata={"method": method.value},
                )
                await self.uow.audit_events.create(audit)
                await self.uow.commit()
                return Return.err(failure)

            plain_token = secrets.token_urlsafe(32)
            now = utcnow()
            reset_token = ResetToken(
                token_hash=hash_token(plain_token),
                purpose=ResetPurpose.master_key_reset,
                key_version=config.key_version,
                used=False,
                issued_at=now,
                expires_at=now + timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES),
            )
            await self.uow.reset_tokens.create(reset_token)

            audit = AuditEvent(
                actor=AuditActor.anonymous,
                action="recovery_challenge_passed",
                event_metadata={"method": method.value, "reset_token_id": str(reset_token.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                RecoveryChallengeResponse(
                    reset_token=plain_token, expires_at=reset_token.expires_at
                )
            )
