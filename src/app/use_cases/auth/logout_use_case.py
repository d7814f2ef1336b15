"""
Logout Use Case

Deactivates the caller's own session.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditActor, AuditEvent, SessionKind
from src.api.utils.jwt import verify_jwt
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - Only the session named in the token is deactivated
    - Logging out an already inactive session succeeds (idempotent)
    - An unreadable token is UNAUTHORIZED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_token: str, expected_kind: Optional[SessionKind] = None
    ) -> Result[LogoutResponse]:
        payload = verify_jwt(session_token)
        if payload is None:
            return Return.err(Error("UNAUTHORIZED", "Invalid or expired session token"))

        try:
            kind = SessionKind(payload.get("kind"))
            session_id = UUID(payload.get("sub"))
        except (ValueError, TypeError):
            return Return.err(Error("UNAUTHORIZED", "Invalid or expired session token"))

        if expected_kind is not None and kind != expected_kind:
            return Return.err(Error("FORBIDDEN", "Session does not grant this access"))

        async with self.uow:
            repository = (
                self.uow.dean_sessions if kind == SessionKind.dean else self.uow.admin_sessions
            )
            deactivated = await repository.deactivate(session_id, utcnow())

            if deactivated:
                audit = AuditEvent(
                    actor=AuditActor.dean if kind == SessionKind.dean else AuditActor.admin,
                    session_id=session_id,
                    action="logout",
                    event_metadata={"kind": kind.value},
                )
                await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(LogoutResponse(status="success", message="Logged out"))
