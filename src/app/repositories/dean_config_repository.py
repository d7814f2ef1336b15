from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import DeanConfig


class IDeanConfigRepository(ABC):
    """DeanConfig repository interface - application layer"""

    @abstractmethod
    async def get(self) -> Optional[DeanConfig]:
        """Get the singleton config row"""
        pass

    @abstractmethod
    async def save(self, config: DeanConfig) -> DeanConfig:
        """Insert or update the singleton config row"""
        pass

    @abstractmethod
    async def replace_master_key(
        self, expected_version: int, master_key_hash: str, changed_at: datetime
    ) -> bool:
        """
        Swap the master key hash only if key_version still equals expected_version.
        Bumps key_version. Returns True if the row was updated.
        """
        pass
