"""
Access Key API Routes - Dean only

Issuance, listing and withdrawal of one-time access keys.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access_keys import (
    CreateAccessKeyUseCase,
    ListAccessKeysUseCase,
    WithdrawAccessKeyUseCase,
    AccessKeyInfo,
    ListAccessKeysResponse,
    WithdrawAccessKeyResponse,
)
from src.app.use_cases.auth import SessionVerification
from src.depends import get_current_dean, get_unit_of_work

router = APIRouter(prefix="/auth/access-keys", tags=["Access Keys"])


class CreateAccessKeyRequest(BaseModel):
    """Access key issuance payload"""

    role: str = Field(..., description="President, Vice President, General Secretary or Media Head")
    validity_days: int = Field(
        default=ApplicationConfig.ACCESS_KEY_DEFAULT_VALIDITY_DAYS,
        description="Days until the key expires",
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccessKeyInfo)
async def create_access_key(
    request: CreateAccessKeyRequest,
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue Access Key

    Returns the token once; the dashboard turns it into a QR code.

    Raises:
        - 400 Bad Request: INVALID_ROLE or VALIDATION_ERROR
        - 401 Unauthorized / 403 Forbidden: not a Dean session
        - 500 Internal Server Error: Server error
    """
    use_case = CreateAccessKeyUseCase(uow)
    result = await use_case.execute(
        request.role, request.validity_days, issued_by_session_id=UUID(dean.session_id)
    )

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_ROLE", "VALIDATION_ERROR"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ListAccessKeysResponse)
async def list_access_keys(
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List Access Keys, newest first"""
    result = await ListAccessKeysUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.delete("/{key_id}", status_code=status.HTTP_200_OK, response_model=WithdrawAccessKeyResponse)
async def withdraw_access_key(
    key_id: UUID,
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Withdraw Access Key

    Deletes a key nobody has redeemed yet.

    Raises:
        - 404 Not Found: ACCESS_KEY_NOT_FOUND
        - 409 Conflict: ACCESS_KEY_ALREADY_USED
        - 500 Internal Server Error: Server error
    """
    use_case = WithdrawAccessKeyUseCase(uow)
    result = await use_case.execute(key_id, withdrawn_by_session_id=UUID(dean.session_id))

    if result.is_err():
        error = result.error
        if error.code == "ACCESS_KEY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "ACCESS_KEY_ALREADY_USED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
