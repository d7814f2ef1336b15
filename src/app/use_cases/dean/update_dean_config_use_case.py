"""
Update Dean Config Use Case

Direct credential changes made from an authenticated Dean session.
"""

import logging
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from src.libs.result import Error, Result, Return
from src.app.services.credential_hasher import hash_secret, normalize_answer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditActor, AuditEvent
from .dtos import UpdateDeanConfigCommand, UpdateDeanConfigResponse

logger = logging.getLogger(__name__)


class UpdateDeanConfigUseCase:
    """
    Use case for updating the Dean config.

    Business Rules:
    - Each field is optional; empty strings are ignored
    - New master key must be at least MASTER_KEY_MIN_LENGTH characters
    - A master key change is a compare-and-swap on key_version: it bumps
      the version (superseding outstanding reset tokens) and fails with
      CONFIG_CONFLICT if a recovery reset got there first
    - Answers are stored normalised (trimmed, lower-cased), codes trimmed
    - Existing sessions stay active
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: UpdateDeanConfigCommand, updated_by_session_id: Optional[UUID] = None
    ) -> Result[UpdateDeanConfigResponse]:
        if (
            command.new_master_key
            and len(command.new_master_key) < ApplicationConfig.MASTER_KEY_MIN_LENGTH
        ):
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Master key must be at least {ApplicationConfig.MASTER_KEY_MIN_LENGTH} characters long",
                )
            )

        async with self.uow:
            config = await self.uow.dean_config.get()
            if config is None:
                return Return.err(Error("NOT_INITIALIZED", "System not initialized"))

            now = utcnow()
            updated_fields = []

            if command.new_master_key:
                replaced = await self.uow.dean_config.replace_master_key(
                    config.key_version, hash_secret(command.new_master_key), now
                )
                if not replaced:
                    # A recovery reset changed the key since it was read
                    return Return.err(
                        Error("CONFIG_CONFLICT", "Master key was changed concurrently, reload and retry")
                    )
                updated_fields.append("master_key")
            if command.security_question and command.security_question.strip():
                config.security_question = command.security_question.strip()
                updated_fields.append("security_question")
            if command.security_answer and command.security_answer.strip():
                config.security_answer_hash = hash_secret(normalize_answer(command.security_answer))
                updated_fields.append("security_answer")
            if command.backup_code and command.backup_code.strip():
                config.backup_code_hash = hash_secret(command.backup_code.strip())
                updated_fields.append("backup_code")

            if updated_fields:
                config.last_changed = now
                await self.uow.dean_config.save(config)

                audit = AuditEvent(
                    actor=AuditActor.dean,
                    session_id=updated_by_session_id,
                    action="dean_config_updated",
                    event_metadata={"fields": updated_fields},
                )
                await self.uow.audit_events.create(audit)

                await self.uow.commit()
                logger.info("Dean config updated: %s", ", ".join(updated_fields))

            return Return.ok(
                UpdateDeanConfigResponse(
                    status="success",
                    updated_fields=updated_fields,
                    last_changed=config.last_changed,
                )
            )
