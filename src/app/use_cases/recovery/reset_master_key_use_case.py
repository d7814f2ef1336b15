"""
Reset Master Key Use Case

Final step of recovery: redeem the reset token and store a new master key.
"""

import logging

from config import ApplicationConfig
from src.libs.result import Error, Result, Return
from src.app.services.credential_hasher import hash_secret, hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditActor, AuditEvent, ResetPurpose
from .dtos import ResetMasterKeyResponse

logger = logging.getLogger(__name__)


class ResetMasterKeyUseCase:
    """
    Use case for setting a new master key with a reset token.

    Business Rules:
    - New master key must be at least MASTER_KEY_MIN_LENGTH (8) characters
    - Unknown, consumed or superseded token -> TOKEN_INVALID
    - Token past expires_at -> EXPIRED
    - Token consumption and key swap are conditional updates in one
      transaction: the second of two racing resets fails TOKEN_INVALID
    - A token issued before any master key change is superseded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, reset_token: str, new_master_key: str) -> Result[ResetMasterKeyResponse]:
        """
        Execute reset master key use case.

        Args:
            reset_token: Plain token from the recovery challenge
            new_master_key: Master key to store

        Returns:
            Result with confirmation, or Error
        """
        if len(new_master_key) < ApplicationConfig.MASTER_KEY_MIN_LENGTH:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Master key must be at least {ApplicationConfig.MASTER_KEY_MIN_LENGTH} characters long",
                )
            )

        async with self.uow:
            token = await self.uow.reset_tokens.get_by_token_hash(hash_token(reset_token))
            if token is None or token.purpose != ResetPurpose.master_key_reset:
                return Return.err(Error("TOKEN_INVALID", "Invalid reset token"))

            if token.used:
                return Return.err(Error("TOKEN_INVALID", "Reset token has already been used"))

            now = utcnow()
            if token.expires_at < now:
                return Return.err(Error("EXPIRED", "Reset token has expired"))

            if not await self.uow.reset_tokens.consume(token.id, now):
                return Return.err(Error("TOKEN_INVALID", "Reset token has already been used"))

            replaced = await self.uow.dean_config.replace_master_key(
                token.key_version, hash_secret(new_master_key), now
            )
            if not replaced:
                # Master key changed after this token was issued; uncommitted
                # consumption is rolled back on exit
                return Return.err(
                    Error("TOKEN_INVALID", "Reset token was superseded by a newer master key")
                )

            audit = AuditEvent(
                actor=AuditActor.anonymous,
                action="master_key_reset",
                event_metadata={"reset_token_id": str(token.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info("Dean master key reset through recovery")

            return Return.ok(
                ResetMasterKeyResponse(status="success", message="Master key has been reset")
            )
