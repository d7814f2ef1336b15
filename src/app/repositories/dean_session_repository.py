from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import DeanSession


class IDeanSessionRepository(ABC):
    """DeanSession repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[DeanSession]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[DeanSession]:
        """List active and inactive sessions, newest first"""
        pass

    @abstractmethod
    async def create(self, session: DeanSession) -> DeanSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: DeanSession) -> DeanSession:
        """Update existing session"""
        pass

    @abstractmethod
    async def deactivate(self, session_id: UUID, revoked_at: datetime) -> bool:
        """Set is_active=False. Returns True if the session was active."""
        pass
