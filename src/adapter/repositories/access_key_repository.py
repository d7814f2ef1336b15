from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.access_key_repository import IAccessKeyRepository
from src.domain.entities import AccessKey


class AccessKeyRepository(IAccessKeyRepository):
    """AccessKey repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, access_key: AccessKey) -> AccessKey:
        """Create a new access key"""
        self.session.add(access_key)
        await self.session.flush()
        await self.session.refresh(access_key)
        return access_key

    async def get_by_id(self, key_id: UUID) -> Optional[AccessKey]:
        """Get access key by ID"""
        stmt = select(AccessKey).where(AccessKey.id == key_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token(self, token: str) -> Optional[AccessKey]:
        """Get access key by its token"""
        stmt = select(AccessKey).where(AccessKey.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[AccessKey]:
        """List all access keys, newest first"""
        stmt = select(AccessKey).order_by(AccessKey.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def claim(
        self, token: str, now: datetime, device_fingerprint: Optional[str] = None
    ) -> bool:
        """
        Single conditional UPDATE: the WHERE clause re-checks is_used and
        expiry inside the store, so two concurrent redemptions cannot both
        see rowcount == 1.
        """
        stmt = (
            update(AccessKey)
            .where(
                AccessKey.token == token,
                AccessKey.is_used == False,
                AccessKey.expires_at >= now,
            )
            .values(
                is_used=True,
                used_at=now,
                bound_device_fingerprint=device_fingerprint,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete(self, access_key: AccessKey) -> None:
        """Delete an access key"""
        await self.session.delete(access_key)
        await self.session.flush()
