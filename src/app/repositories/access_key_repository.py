from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import AccessKey


class IAccessKeyRepository(ABC):
    """AccessKey repository interface - application layer"""

    @abstractmethod
    async def create(self, access_key: AccessKey) -> AccessKey:
        """Create a new access key"""
        pass

    @abstractmethod
    async def get_by_id(self, key_id: UUID) -> Optional[AccessKey]:
        """Get access key by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[AccessKey]:
        """Get access key by its token"""
        pass

    @abstractmethod
    async def list_all(self) -> List[AccessKey]:
        """List all access keys, newest first"""
        pass

    @abstractmethod
    async def claim(
        self, token: str, now: datetime, device_fingerprint: Optional[str] = None
    ) -> bool:
        """
        Atomically mark an unused, unexpired key as used.
        Returns True only for the single caller that flipped is_used.
        """
        pass

    @abstractmethod
    async def delete(self, access_key: AccessKey) -> None:
        """Delete an access key"""
        pass
