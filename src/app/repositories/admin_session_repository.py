from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import AdminSession


class IAdminSessionRepository(ABC):
    """AdminSession repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[AdminSession]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[AdminSession]:
        """List active and inactive sessions, newest first"""
        pass

    @abstractmethod
    async def create(self, session: AdminSession) -> AdminSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: AdminSession) -> AdminSession:
        """Update existing session"""
        pass

    @abstractmethod
    async def deactivate(self, session_id: UUID, revoked_at: datetime) -> bool:
        """Set is_active=False. Returns True if the session was active."""
        pass
