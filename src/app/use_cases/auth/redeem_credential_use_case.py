"""
Redeem Credential Use Case

Single login box: the credential is tried as an access key first,
then as the Dean master key.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .admin_login_use_case import AdminLoginUseCase
from .dean_login_use_case import DeanLoginUseCase
from .dtos import LoginResponse, RequestContext

# Client-side failures that collapse into one generic error
_CREDENTIAL_ERRORS = ("INVALID_CREDENTIAL", "EXPIRED", "ALREADY_USED")


class RedeemCredentialUseCase:
    """
    Use case for the dual-path login.

    Business Rules:
    - Access key path first, Dean path second
    - Whatever made both paths fail, the caller only sees INVALID_CREDENTIAL,
      so the response never reveals which kind of credential was close
    - Server-side failures (e.g. NOT_INITIALIZED) are passed through
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, credential: str, context: RequestContext) -> Result[LoginResponse]:
        admin_result = await AdminLoginUseCase(self.uow).execute(credential, context)
        if admin_result.is_ok():
            return admin_result
        if admin_result.error.code not in _CREDENTIAL_ERRORS:
            return admin_result

        dean_result = await DeanLoginUseCase(self.uow).execute(credential, context)
        if dean_result.is_ok():
            return dean_result
        if dean_result.error.code not in _CREDENTIAL_ERRORS:
            return dean_result

        return Return.err(Error("INVALID_CREDENTIAL", "Invalid access key"))
