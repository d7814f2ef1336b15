from abc import ABC, abstractmethod

from src.app.repositories.access_key_repository import IAccessKeyRepository
from src.app.repositories.admin_session_repository import IAdminSessionRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.dean_config_repository import IDeanConfigRepository
from src.app.repositories.dean_session_repository import IDeanSessionRepository
from src.app.repositories.reset_token_repository import IResetTokenRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    dean_config: IDeanConfigRepository
    access_keys: IAccessKeyRepository
    admin_sessions: IAdminSessionRepository
    dean_sessions: IDeanSessionRepository
    reset_tokens: IResetTokenRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
