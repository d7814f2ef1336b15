from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_key_repository import AccessKeyRepository
from src.adapter.repositories.admin_session_repository import AdminSessionRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.dean_config_repository import DeanConfigRepository
from src.adapter.repositories.dean_session_repository import DeanSessionRepository
from src.adapter.repositories.reset_token_repository import ResetTokenRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.dean_config = DeanConfigRepository(self.session)
        self.access_keys = AccessKeyRepository(self.session)
        self.admin_sessions = AdminSessionRepository(self.session)
        self.dean_sessions = DeanSessionRepository(self.session)
        self.reset_tokens = ResetTokenRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
