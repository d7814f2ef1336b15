"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the login/session domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RequestContext(BaseModel):
    """Client metadata recorded on the session a login creates"""

    device_info: str = "Unknown"
    ip_address: Optional[str] = None
    device_fingerprint: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for every login path (access key, master key, dual)"""

    session_token: str
    session_id: str
    kind: str
    role: str
    expires_at: datetime


class SessionVerification(BaseModel):
    """Response for session liveness checks"""

    valid: bool
    session_id: Optional[str] = None
    kind: Optional[str] = None
    role: Optional[str] = None


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
    message: str
