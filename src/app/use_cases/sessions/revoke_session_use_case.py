"""
Revoke Session Use Case

Dean-initiated termination of an admin or Dean session.
"""

import logging
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditActor, AuditEvent, SessionKind
from .dtos import RevokeSessionResponse

logger = logging.getLogger(__name__)


class RevokeSessionUseCase:
    """
    Use case for revoking a session.

    Business Rules:
    - Sets is_active=False; the row is kept
    - Idempotent: an already inactive session is a no-op, not an error
    - The originating access key stays is_used=True
    - Unknown session id -> SESSION_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        session_id: UUID,
        kind: SessionKind,
        revoked_by_session_id: Optional[UUID] = None,
    ) -> Result[RevokeSessionResponse]:
        """
        Execute revoke session use case.

        Args:
            session_id: Session to revoke
            kind: Which registry the session lives in
            revoked_by_session_id: Dean session performing the revocation

        Returns:
            Result with the session's new state, or Error
        """
        async with self.uow:
            repository = (
                self.uow.dean_sessions if kind == SessionKind.dean else self.uow.admin_sessions
            )
            session = await repository.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            revoked = await repository.deactivate(session_id, utcnow())

            if revoked:
                audit = AuditEvent(
                    actor=AuditActor.dean,
                    session_id=revoked_by_session_id,
                    action="revoke_session",
                    event_metadata={
                        "target_session_id": str(session_id),
                        "kind": kind.value,
                    },
                )
                await self.uow.audit_events.create(audit)
                logger.info("Revoked %s session %s", kind.value, session_id)

            await self.uow.commit()

            return Return.ok(
                RevokeSessionResponse(
                    session_id=str(session_id),
                    kind=kind.value,
                    is_active=False,
                    revoked=revoked,
                )
            )
