"""
Admin Login Use Case

Redeems a one-time access key into an admin session.
"""

import logging
from datetime import timedelta

from config import ApplicationConfig
from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AdminSession, AuditActor, AuditEvent, SessionKind
from src.api.utils.jwt import generate_session_jwt
from .dtos import LoginResponse, RequestContext

logger = logging.getLogger(__name__)


class AdminLoginUseCase:
    """
    Use case for access key redemption.

    Business Rules:
    - Unknown token -> INVALID_CREDENTIAL
    - now > expires_at -> EXPIRED, even if the key was never used
    - is_used already set -> ALREADY_USED
    - is_used is flipped by one conditional UPDATE in the same transaction
      as the session insert, so a key yields at most one session
    - Session records user agent, IP and optional device fingerprint
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, context: RequestContext) -> Result[LoginResponse]:
        """
        Execute admin login use case.

        Args:
            token: Access key token as typed or scanned by the board member
            context: Request metadata for the new session

        Returns:
            Result with LoginResponse, or Error
        """
        token = token.strip()
        async with self.uow:
            now = utcnow()
            access_key = await self.uow.access_keys.get_by_token(token)

            if access_key is None:
                return Return.err(Error("INVALID_CREDENTIAL", "Invalid access key"))

            if access_key.is_expired(now):
                return Return.err(Error("EXPIRED", "Access key has expired"))

            if access_key.is_used:
                return Return.err(Error("ALREADY_USED", "Access key has already been used"))

            # Check-and-set in the store; losing a race reads as ALREADY_USED
            claimed = await self.uow.access_keys.claim(
                token, now, device_fingerprint=context.device_fingerprint
            )
            if not claimed:
                return Return.err(Error("ALREADY_USED", "Access key has already been used"))

            session = AdminSession(
                role=access_key.role,
                access_key_token=access_key.token,
                device_info=context.device_info,
                ip_address=context.ip_address,
                expires_at=now + timedelta(days=ApplicationConfig.ADMIN_SESSION_TTL_DAYS),
                last_used_at=now,
            )
            await self.uow.admin_sessions.create(session)

            audit = AuditEvent(
                actor=AuditActor.admin,
                session_id=session.id,
                action="admin_login",
                event_metadata={
                    "access_key_id": str(access_key.id),
                    "role": access_key.role.value,
                    "ip_address": context.ip_address,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info("Access key %s redeemed by %s", access_key.id, access_key.role.value)

            session_token = generate_session_jwt(
                session.id, SessionKind.admin.value, access_key.role.value, session.expires_at
            )

            return Return.ok(
                LoginResponse(
                    session_token=session_token,
                    session_id=str(session.id),
                    kind=SessionKind.admin.value,
                    role=access_key.role.value,
                    expires_at=session.expires_at,
                )
            )
