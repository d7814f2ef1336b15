from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.dean_session_repository import IDeanSessionRepository
from src.domain.entities import DeanSession


class DeanSessionRepository(IDeanSessionRepository):
    """DeanSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[DeanSession]:
        """Get session by ID"""
        stmt = select(DeanSession).where(DeanSession.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[DeanSession]:
        """List active and inactive sessions, newest first"""
        stmt = select(DeanSession).order_by(DeanSession.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, session_obj: DeanSession) -> DeanSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: DeanSession) -> DeanSession:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def deactivate(self, session_id: UUID, revoked_at: datetime) -> bool:
        """Deactivate a session by ID, no-op if it is already inactive"""
        stmt = (
            update(DeanSession)
            .where(DeanSession.id == session_id, DeanSession.is_active == True)
            .values(is_active=False, revoked_at=revoked_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
