"""
Session Registry DTOs
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class SessionInfo(BaseModel):
    """Admin or Dean session row as listed on the Dean dashboard"""

    id: str
    kind: str
    role: str
    access_key_token: Optional[str] = None
    device_info: str
    ip_address: Optional[str] = None
    created_at: datetime
    expires_at: datetime
    last_used_at: Optional[datetime] = None
    is_active: bool
    revoked_at: Optional[datetime] = None


class SessionListResponse(BaseModel):
    """Response for list sessions use case"""

    sessions: List[SessionInfo]


class RevokeSessionResponse(BaseModel):
    """Response for revoke session use case"""

    session_id: str
    kind: str
    is_active: bool
    revoked: bool
