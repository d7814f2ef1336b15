"""
Verify Session Use Case

Re-validates a bearer session token against the store.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import DEAN_ROLE, SessionKind
from src.api.utils.jwt import verify_jwt
from .dtos import SessionVerification


class VerifySessionUseCase:
    """
    Use case for session liveness checks.

    Business Rules:
    - Token signature and exp are checked first
    - The session row must exist, be active and not be past expires_at
    - Role comes from the stored session, never from the token claims
    - last_used_at is refreshed on every successful check
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_token: str, expected_kind: Optional[SessionKind] = None
    ) -> Result[SessionVerification]:
        """
        Execute verify session use case.

        Args:
            session_token: Bearer token returned at login
            expected_kind: Reject sessions of the other kind with FORBIDDEN

        Returns:
            Result with SessionVerification (always valid=True), or Error
        """
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
            session = await repository.get_by_id(session_id)

            now = utcnow()
            if session is None or not session.is_active:
                return Return.err(Error("UNAUTHORIZED", "Session expired or revoked"))
            if session.expires_at < now:
                return Return.err(Error("UNAUTHORIZED", "Session expired or revoked"))

            session.last_used_at = now
            await repository.update(session)
            await self.uow.commit()

            role = DEAN_ROLE if kind == SessionKind.dean else session.role.value
            return Return.ok(
                SessionVerification(
                    valid=True,
                    session_id=str(session.id),
                    kind=kind.value,
                    role=role,
                )
            )
