"""
Dean API Routes - Security Console

Session registry, Dean config and audit trail. Every endpoint requires an
active Dean session.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import GetAuditEventsUseCase
from src.app.use_cases.auth import SessionVerification
from src.app.use_cases.dean import (
    GetDeanConfigUseCase,
    UpdateDeanConfigUseCase,
    GenerateBackupCodeUseCase,
    UpdateDeanConfigCommand,
    DeanConfigResponse,
    UpdateDeanConfigResponse,
    BackupCodeResponse,
)
from src.app.use_cases.sessions import (
    ListSessionsUseCase,
    RevokeSessionUseCase,
    SessionListResponse,
    RevokeSessionResponse,
)
from src.depends import get_current_dean, get_unit_of_work
from src.domain.entities import SessionKind

router = APIRouter(prefix="/auth/dean", tags=["Dean"])


# ============================================================================
# Session registry
# ============================================================================


@router.get("/sessions", status_code=status.HTTP_200_OK, response_model=SessionListResponse)
async def list_sessions(
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Sessions

    Admin and Dean sessions, active and inactive, newest first.
    """
    result = await ListSessionsUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class RevokeSessionRequest(BaseModel):
    """Which registry the session id belongs to"""

    kind: SessionKind = Field(..., description="admin or dean")


@router.post(
    "/sessions/{session_id}/revoke",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionResponse,
)
async def revoke_session(
    session_id: UUID,
    request: RevokeSessionRequest,
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Session

    Idempotent: revoking an inactive session answers 200 with revoked=false.

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = RevokeSessionUseCase(uow)
    result = await use_case.execute(
        session_id, request.kind, revoked_by_session_id=UUID(dean.session_id)
    )

    if result.is_err():
        error = result.error
        if error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


# ============================================================================
# Dean config
# ============================================================================


@router.get("/config", status_code=status.HTTP_200_OK, response_model=DeanConfigResponse)
async def get_config(
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Dean Config (no secrets)"""
    result = await GetDeanConfigUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class UpdateDeanConfigRequest(BaseModel):
    """Dean config update payload; omitted fields are left unchanged"""

    new_master_key: Optional[str] = Field(None, description="New master key (min 8 chars)")
    security_question: Optional[str] = Field(None, max_length=255)
    security_answer: Optional[str] = None
    backup_code: Optional[str] = None


@router.put("/config", status_code=status.HTTP_200_OK, response_model=UpdateDeanConfigResponse)
async def update_config(
    request: UpdateDeanConfigRequest,
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Dean Config

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (master key too short)
        - 409 Conflict: CONFIG_CONFLICT (master key changed by a recovery reset)
        - 500 Internal Server Error: Server error
    """
    command = UpdateDeanConfigCommand(
        new_master_key=request.new_master_key,
        security_question=request.security_question,
        security_answer=request.security_answer,
        backup_code=request.backup_code,
    )

    use_case = UpdateDeanConfigUseCase(uow)
    result = await use_case.execute(command, updated_by_session_id=UUID(dean.session_id))

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "CONFIG_CONFLICT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post("/config/backup-code", status_code=status.HTTP_200_OK, response_model=BackupCodeResponse)
async def generate_backup_code(
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Generate Backup Code

    The previous code stops working immediately. The new code is shown once.
    """
    use_case = GenerateBackupCodeUseCase(uow)
    result = await use_case.execute(generated_by_session_id=UUID(dean.session_id))

    if result.is_err():
        raise ServerError(result.error)

    return result.value


# ============================================================================
# Audit trail
# ============================================================================


class AuditEventResponse(BaseModel):
    """Single audit event in response"""

    action: str
    actor: str
    session_id: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    """GET /auth/dean/audit-events response payload"""

    events: List[AuditEventResponse]
    next_cursor: Optional[str]


@router.get("/audit-events", status_code=status.HTTP_200_OK, response_model=AuditEventsResponse)
async def get_audit_events(
    dean: SessionVerification = Depends(get_current_dean),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor from a previous page"),
):
    """Audit Events, newest first"""
    result = await GetAuditEventsUseCase(uow).execute(limit=limit, cursor=cursor)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
