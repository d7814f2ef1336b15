from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import RequestContext, SessionVerification, VerifySessionUseCase
from src.domain.entities import SessionKind

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_request_context(request: Request) -> RequestContext:
    """Client metadata recorded on sessions created by this request"""
    return RequestContext(
        device_info=request.headers.get("user-agent", "Unknown"),
        ip_address=request.client.host if request.client else None,
        device_fingerprint=request.headers.get("x-device-fingerprint"),
    )


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Bearer token from the Authorization header, None when absent"""
    if credentials is None:
        return None
    return credentials.credentials


def require_bearer_token(token: Optional[str] = Depends(get_bearer_token)) -> str:
    if token is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Session token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return token


async def get_current_dean(
    token: str = Depends(require_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> SessionVerification:
    """
    Dependency guarding Dean-only endpoints.

    Re-validates the session against the store on every request, so a
    revoked Dean session stops working immediately.

    Raises:
        ClientError: 401 if the session is invalid, revoked or expired,
                     403 if the token belongs to an admin session
    """
    result = await VerifySessionUseCase(uow).execute(token, expected_kind=SessionKind.dean)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHORIZED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
