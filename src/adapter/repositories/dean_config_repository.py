from datetime import datetime
from typing import Optional

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.dean_config_repository import IDeanConfigRepository
from src.domain.entities import DEAN_CONFIG_ID, DeanConfig


class DeanConfigRepository(IDeanConfigRepository):
    """DeanConfig repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[DeanConfig]:
        stmt = select(DeanConfig).where(DeanConfig.id == DEAN_CONFIG_ID)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def save(self, config: DeanConfig) -> DeanConfig:
        self.session.add(config)
        await self.session.flush()
        await self.session.refresh(config)
        return config

    async def replace_master_key(
        self, expected_version: int, master_key_hash: str, changed_at: datetime
    ) -> bool:
        """Compare-and-swap on key_version so racing resets cannot both win"""
        stmt = (
            update(DeanConfig)
            .where(
                DeanConfig.id == DEAN_CONFIG_ID,
                DeanConfig.key_version == expected_version,
            )
            .values(
                master_key_hash=master_key_hash,
                key_version=expected_version + 1,
                last_changed=changed_at,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
