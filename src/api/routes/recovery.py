from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.recovery import (
    GetSecurityQuestionUseCase,
    VerifyRecoveryChallengeUseCase,
    ResetMasterKeyUseCase,
    SecurityQuestionResponse,
    RecoveryChallengeResponse,
    ResetMasterKeyResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import RecoveryMethod

router = APIRouter(prefix="/auth/recovery", tags=["Recovery"])


def _raise_challenge_error(error):
    if error.code == "INCORRECT_ANSWER":
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("/question", status_code=status.HTTP_200_OK, response_model=SecurityQuestionResponse)
async def get_security_question(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Security Question

    Returns the question shown on the recovery screen.
    """
    result = await GetSecurityQuestionUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class SecurityAnswerRequest(BaseModel):
    """Recovery by security question"""

    answer: str = Field(..., min_length=1, description="Answer to the security question")


@router.post("/question", status_code=status.HTTP_200_OK, response_model=RecoveryChallengeResponse)
async def answer_security_question(
    request: SecurityAnswerRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Recovery - Security Question

    A correct answer (trimmed, case-insensitive) returns a reset token.

    Raises:
        - 401 Unauthorized: INCORRECT_ANSWER
        - 500 Internal Server Error: System not initialized
    """
    use_case = VerifyRecoveryChallengeUseCase(uow)
    result = await use_case.execute(RecoveryMethod.question, request.answer)

    if result.is_err():
        _raise_challenge_error(result.error)

    return result.value


class BackupCodeRequest(BaseModel):
    """Recovery by backup code"""

    backup_code: str = Field(..., min_length=1, description="Dean backup code")


@router.post("/backup", status_code=status.HTTP_200_OK, response_model=RecoveryChallengeResponse)
async def submit_backup_code(
    request: BackupCodeRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Recovery - Backup Code

    Raises:
        - 401 Unauthorized: INCORRECT_ANSWER
        - 500 Internal Server Error: System not initialized
    """
    use_case = VerifyRecoveryChallengeUseCase(uow)
    result = await use_case.execute(RecoveryMethod.backup, request.backup_code)

    if result.is_err():
        _raise_challenge_error(result.error)

    return result.value


class ResetMasterKeyRequest(BaseModel):
    """Final recovery step"""

    reset_token: str = Field(..., min_length=1, description="Token from a passed challenge")
    new_master_key: str = Field(..., description="New master key (min 8 chars)")


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=ResetMasterKeyResponse)
async def reset_master_key(
    request: ResetMasterKeyRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Recovery - Reset Master Key

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (short key) or TOKEN_INVALID
        - 410 Gone: EXPIRED reset token
        - 500 Internal Server Error: Server error
    """
    use_case = ResetMasterKeyUseCase(uow)
    result = await use_case.execute(request.reset_token, request.new_master_key)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "TOKEN_INVALID"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value
