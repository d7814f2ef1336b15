"""
Generate Backup Code Use Case

Rotates the Dean's backup code.
"""

import secrets
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.credential_hasher import hash_secret
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditActor, AuditEvent
from .dtos import BackupCodeResponse


def generate_backup_code() -> str:
    return f"CSA-BACKUP-{secrets.token_hex(6).upper()}"


class GenerateBackupCodeUseCase:
    """
    Use case for backup code rotation.

    Business Rules:
    - The old code stops working as soon as the new hash is committed
    - Only the hash is stored; the plain code is returned exactly once
    - Independent of the recovery state machine
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, generated_by_session_id: Optional[UUID] = None
    ) -> Result[BackupCodeResponse]:
        async with self.uow:
            config = await self.uow.dean_config.get()
            if config is None:
                return Return.err(Error("NOT_INITIALIZED", "System not initialized"))

            backup_code = generate_backup_code()
            config.backup_code_hash = hash_secret(backup_code)
            config.last_changed = utcnow()
            await self.uow.dean_config.save(config)

            audit = AuditEvent(
                actor=AuditActor.dean,
                session_id=generated_by_session_id,
                action="backup_code_rotated",
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(BackupCodeResponse(backup_code=backup_code))
