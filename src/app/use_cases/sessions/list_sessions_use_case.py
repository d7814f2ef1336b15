"""
List Sessions Use Case

Merged admin + Dean session registry for the Dean dashboard.
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import DEAN_ROLE, SessionKind
from .dtos import SessionInfo, SessionListResponse


class ListSessionsUseCase:
    """
    Use case for listing sessions.

    Business Rules:
    - Active and inactive sessions are both returned (audit view)
    - Ordered by created_at, newest first, across both kinds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[SessionListResponse]:
        async with self.uow:
            admin_sessions = await self.uow.admin_sessions.list_all()
            dean_sessions = await self.uow.dean_sessions.list_all()

            sessions = [
                SessionInfo(
                    id=str(s.id),
                    kind=SessionKind.admin.value,
                    role=s.role.value,
                    access_key_token=s.access_key_token,
                    device_info=s.device_info,
                    ip_address=s.ip_address,
                    created_at=s.created_at,
                    expires_at=s.expires_at,
                    last_used_at=s.last_used_at,
                    is_active=s.is_active,
                    revoked_at=s.revoked_at,
                )
                for s in admin_sessions
            ]
            sessions.extend(
                SessionInfo(
                    id=str(s.id),
                    kind=SessionKind.dean.value,
                    role=DEAN_ROLE,
                    device_info=s.device_info,
                    ip_address=s.ip_address,
                    created_at=s.created_at,
                    expires_at=s.expires_at,
                    last_used_at=s.last_used_at,
                    is_active=s.is_active,
                    revoked_at=s.revoked_at,
                )
                for s in dean_sessions
            )
            sessions.sort(key=lambda s: s.created_at, reverse=True)

            return Return.ok(SessionListResponse(sessions=sessions))
