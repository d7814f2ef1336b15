"""
Withdraw Access Key Use Case

Lets the Dean take back a key that nobody has redeemed yet.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditActor, AuditEvent
from .dtos import WithdrawAccessKeyResponse


class WithdrawAccessKeyUseCase:
    """
    Use case for deleting an unredeemed access key.

    Business Rules:
    - Only keys with is_used=False can be withdrawn
    - Redeemed keys stay for the audit trail (ACCESS_KEY_ALREADY_USED)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, key_id: UUID, withdrawn_by_session_id: Optional[UUID] = None
    ) -> Result[WithdrawAccessKeyResponse]:
        async with self.uow:
            access_key = await self.uow.access_keys.get_by_id(key_id)
            if access_key is None:
                return Return.err(Error("ACCESS_KEY_NOT_FOUND", "Access key not found"))

            if access_key.is_used:
                return Return.err(
                    Error(
                        "ACCESS_KEY_ALREADY_USED",
                        "Redeemed access keys are kept for the audit trail",
                    )
                )

            await self.uow.access_keys.delete(access_key)

            audit = AuditEvent(
                actor=AuditActor.dean,
                session_id=withdrawn_by_session_id,
                action="access_key_withdrawn",
                event_metadata={
                    "access_key_id": str(key_id),
                    "role": access_key.role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(WithdrawAccessKeyResponse(status="withdrawn", key_id=str(key_id)))
