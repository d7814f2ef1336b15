"""
Dean Configuration Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class UpdateDeanConfigCommand(BaseModel):
    """Fields the Dean may change; None leaves a field untouched"""

    new_master_key: Optional[str] = None
    security_question: Optional[str] = None
    security_answer: Optional[str] = None
    backup_code: Optional[str] = None


class DeanConfigResponse(BaseModel):
    """Dean config as shown on the security tab (no secrets)"""

    security_question: str
    has_backup_code: bool
    last_changed: datetime


class UpdateDeanConfigResponse(BaseModel):
    """Response for update dean config use case"""

    status: str
    updated_fields: List[str]
    last_changed: datetime


class BackupCodeResponse(BaseModel):
    """Freshly generated backup code, shown once"""

    backup_code: str
