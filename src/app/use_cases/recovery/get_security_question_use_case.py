from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import SecurityQuestionResponse


class GetSecurityQuestionUseCase:
    """Returns the question shown on the recovery screen"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[SecurityQuestionResponse]:
        async with self.uow:
            config = await self.uow.dean_config.get()
            if config is None:
                return Return.err(Error("NOT_INITIALIZED", "System not initialized"))
            return Return.ok(SecurityQuestionResponse(question=config.security_question))
