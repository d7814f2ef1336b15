"""
Dean Login Use Case

Authenticates the Dean with the master key and opens a Dean session.
"""

import logging
from datetime import timedelta

from config import ApplicationConfig
from src.libs.result import Error, Result, Return
from src.app.services.credential_hasher import verify_secret
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import DEAN_ROLE, AuditActor, AuditEvent, DeanSession, SessionKind
from src.api.utils.jwt import generate_session_jwt
from .dtos import LoginResponse, RequestContext

logger = logging.getLogger(__name__)


class DeanLoginUseCase:
    """
    Use case for master key login.

    Business Rules:
    - Master key compared with bcrypt (constant time), never plaintext equality
    - Missing DeanConfig means the system was never seeded (NOT_INITIALIZED)
    - Every successful login creates a new DeanSession
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, master_key: str, context: RequestContext) -> Result[LoginResponse]:
        """
        Execute Dean login use case.

        Args:
            master_key: Plain text master key
            context: Request metadata for the new session

        Returns:
            Result with LoginResponse, or Error
        """
        async with self.uow:
            config = await self.uow.dean_config.get()
            if config is None:
                logger.error("Dean login attempted before the config was seeded")
                return Return.err(Error("NOT_INITIALIZED", "System not initialized"))

            if not verify_secret(master_key, config.master_key_hash):
                logger.warning("Rejected Dean login from %s", context.ip_address)
                return Return.err(Error("INVALID_CREDENTIAL", "Invalid master key"))

            now = utcnow()
            session = DeanSession(
                device_info=context.device_info,
                ip_address=context.ip_address,
                expires_at=now + timedelta(days=ApplicationConfig.DEAN_SESSION_TTL_DAYS),
                last_used_at=now,
            )
            await self.uow.dean_sessions.create(session)

            audit = AuditEvent(
                actor=AuditActor.dean,
                session_id=session.id,
                action="dean_login",
                event_metadata={"ip_address": context.ip_address},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            session_token = generate_session_jwt(
                session.id, SessionKind.dean.value, DEAN_ROLE, session.expires_at
            )

            return Return.ok(
                LoginResponse(
                    session_token=session_token,
                    session_id=str(session.id),
                    kind=SessionKind.dean.value,
                    role=DEAN_ROLE,
                    expires_at=session.expires_at,
                )
            )
