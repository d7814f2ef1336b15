from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import ResetToken


class IResetTokenRepository(ABC):
    """ResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: ResetToken) -> ResetToken:
        """Create a new reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[ResetToken]:
        """Get reset token by token hash"""
        pass

    @abstractmethod
    async def consume(self, token_id: UUID, used_at: datetime) -> bool:
        """Mark an unused token as used. Returns True for the single winning caller."""
        pass
