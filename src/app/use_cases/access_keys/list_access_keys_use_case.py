from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AccessKeyInfo, ListAccessKeysResponse


class ListAccessKeysUseCase:
    """Lists every issued access key, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListAccessKeysResponse]:
        async with self.uow:
            keys = await self.uow.access_keys.list_all()
            return Return.ok(
                ListAccessKeysResponse(keys=[AccessKeyInfo.from_entity(k) for k in keys])
            )
