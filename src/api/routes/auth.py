from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AdminLoginUseCase,
    DeanLoginUseCase,
    RedeemCredentialUseCase,
    VerifySessionUseCase,
    LogoutUseCase,
    RequestContext,
    LoginResponse,
    SessionVerification,
    LogoutResponse,
)
from src.depends import (
    get_bearer_token,
    get_request_context,
    get_unit_of_work,
    require_bearer_token,
)
from src.domain.entities import SessionKind

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _raise_login_error(error):
    if error.code == "INVALID_CREDENTIAL":
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code == "EXPIRED":
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    elif error.code == "ALREADY_USED":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    The single login box: an access key or the Dean master key.
    """

    credential: str = Field(..., min_length=1, description="Access key or master key")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Dual-path Login

    Tries the credential as an access key, then as the Dean master key.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIAL whatever made both paths fail
        - 500 Internal Server Error: System not initialized / server error
    """
    use_case = RedeemCredentialUseCase(uow)
    result = await use_case.execute(request.credential, context)

    if result.is_err():
        _raise_login_error(result.error)

    return result.value


class AdminLoginRequest(BaseModel):
    """Access key redemption payload"""

    token: str = Field(..., min_length=1, description="Access key issued by the Dean")


@router.post("/admin/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def admin_login(
    request: AdminLoginRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Access Key Login

    Redeems a one-time access key into an admin session.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIAL (unknown key)
        - 409 Conflict: ALREADY_USED
        - 410 Gone: EXPIRED
        - 500 Internal Server Error: Server error
    """
    use_case = AdminLoginUseCase(uow)
    result = await use_case.execute(request.token, context)

    if result.is_err():
        _raise_login_error(result.error)

    return result.value


class DeanLoginRequest(BaseModel):
    """Master key login payload"""

    master_key: str = Field(..., min_length=1, description="Dean master key")


@router.post("/dean/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def dean_login(
    request: DeanLoginRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Dean Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIAL
        - 500 Internal Server Error: System not initialized
    """
    use_case = DeanLoginUseCase(uow)
    result = await use_case.execute(request.master_key, context)

    if result.is_err():
        _raise_login_error(result.error)

    return result.value


async def _verify(token: Optional[str], kind: SessionKind, uow: UnitOfWork):
    if token is None:
        return SessionVerification(valid=False)

    result = await VerifySessionUseCase(uow).execute(token, expected_kind=kind)

    if result.is_err():
        error = result.error
        if error.code in ("UNAUTHORIZED", "FORBIDDEN"):
            return SessionVerification(valid=False)
        raise ServerError(error)

    return result.value


@router.get("/admin/verify", status_code=status.HTTP_200_OK, response_model=SessionVerification)
async def verify_admin(
    token: Optional[str] = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Admin Session Verification

    Called by the dashboard on load to restore a stored session.
    Always answers 200; valid=false for missing, revoked or expired sessions.
    """
    return await _verify(token, SessionKind.admin, uow)


@router.get("/dean/verify", status_code=status.HTTP_200_OK, response_model=SessionVerification)
async def verify_dean(
    token: Optional[str] = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Dean Session Verification

    Always answers 200; valid=false for missing, revoked or expired sessions.
    """
    return await _verify(token, SessionKind.dean, uow)


async def _logout(token: str, kind: Optional[SessionKind], uow: UnitOfWork):
    result = await LogoutUseCase(uow).execute(token, expected_kind=kind)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHORIZED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    token: str = Depends(require_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Deactivates the session the bearer token belongs to (admin or Dean).
    Idempotent for sessions that are already inactive.
    """
    return await _logout(token, None, uow)


@router.post("/admin/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def admin_logout(
    token: str = Depends(require_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Admin Logout"""
    return await _logout(token, SessionKind.admin, uow)


@router.post("/dean/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def dean_logout(
    token: str = Depends(require_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Dean Logout"""
    return await _logout(token, SessionKind.dean, uow)
