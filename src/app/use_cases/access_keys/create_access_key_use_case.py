"""
Create Access Key Use Case

Dean-only issuance of one-time, role-scoped access keys.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AccessKey, AdminRole, AuditActor, AuditEvent
from .dtos import AccessKeyInfo

logger = logging.getLogger(__name__)


def generate_access_key_token(role: AdminRole) -> str:
    """CSA-<first three letters of the role>-<128 random bits as hex>"""
    prefix = role.value.replace(" ", "")[:3].upper()
    return f"CSA-{prefix}-{secrets.token_hex(16).upper()}"


class CreateAccessKeyUseCase:
    """
    Use case for issuing an access key.

    Business Rules:
    - Caller is an authenticated Dean (checked by the API dependency)
    - Role must be one of the four board roles (INVALID_ROLE otherwise)
    - validity_days is a positive integer (VALIDATION_ERROR otherwise)
    - Key starts unused, expires_at = now + validity_days
    - The token is returned in the response; it is stored in clear for lookup
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        role: str,
        validity_days: int,
        issued_by_session_id: Optional[UUID] = None,
    ) -> Result[AccessKeyInfo]:
        """
        Execute create access key use case.

        Args:
            role: Board role the key grants
            validity_days: Days until the key expires
            issued_by_session_id: Dean session issuing the key (audit)

        Returns:
            Result with the created AccessKeyInfo, or Error
        """
        try:
            admin_role = AdminRole(role)
        except ValueError:
            return Return.err(Error("INVALID_ROLE", f"Unknown role: {role}"))

        if isinstance(validity_days, bool) or not isinstance(validity_days, int) or validity_days < 1:
            return Return.err(
                Error("VALIDATION_ERROR", "validity_days must be a positive integer")
            )

        async with self.uow:
            now = utcnow()
            access_key = AccessKey(
                token=generate_access_key_token(admin_role),
                role=admin_role,
                is_used=False,
                issued_by="Dean",
                created_at=now,
                expires_at=now + timedelta(days=validity_days),
            )
            await self.uow.access_keys.create(access_key)

            audit = AuditEvent(
                actor=AuditActor.dean,
                session_id=issued_by_session_id,
                action="access_key_issued",
                event_metadata={
                    "access_key_id": str(access_key.id),
                    "role": admin_role.value,
                    "validity_days": validity_days,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info("Issued access key %s for %s", access_key.id, admin_role.value)

            return Return.ok(AccessKeyInfo.from_entity(access_key))
