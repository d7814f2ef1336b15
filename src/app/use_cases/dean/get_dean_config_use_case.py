from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeanConfigResponse


class GetDeanConfigUseCase:
    """Reads the non-secret part of the Dean config"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DeanConfigResponse]:
        async with self.uow:
            config = await self.uow.dean_config.get()
            if config is None:
                return Return.err(Error("NOT_INITIALIZED", "System not initialized"))

            return Return.ok(
                DeanConfigResponse(
                    security_question=config.security_question,
                    has_backup_code=bool(config.backup_code_hash),
                    last_changed=config.last_changed,
                )
            )
