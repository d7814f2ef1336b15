from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.reset_token_repository import IResetTokenRepository
from src.domain.entities import ResetToken


class ResetTokenRepository(IResetTokenRepository):
    """ResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: ResetToken) -> ResetToken:
        """Create a new reset token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[ResetToken]:
        """Get reset token by token hash"""
        stmt = select(ResetToken).where(ResetToken.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def consume(self, token_id: UUID, used_at: datetime) -> bool:
        """Mark token as used only if nobody else did first"""
        stmt = (
            update(ResetToken)
            .where(ResetToken.id == token_id, ResetToken.used == False)
            .values(used=True, used_at=used_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
