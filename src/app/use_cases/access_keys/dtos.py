"""
Access Key Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from src.domain.entities import AccessKey


class AccessKeyInfo(BaseModel):
    """Access key as shown on the Dean dashboard"""

    id: str
    token: str
    role: str
    created_at: datetime
    expires_at: datetime
    is_used: bool
    used_at: Optional[datetime] = None
    issued_by: str

    @classmethod
    def from_entity(cls, access_key: AccessKey) -> "AccessKeyInfo":
        return cls(
            id=str(access_key.id),
            token=access_key.token,
            role=access_key.role.value,
            created_at=access_key.created_at,
            expires_at=access_key.expires_at,
            is_used=access_key.is_used,
            used_at=access_key.used_at,
            issued_by=access_key.issued_by,
        )


class ListAccessKeysResponse(BaseModel):
    """Response for list access keys use case"""

    keys: List[AccessKeyInfo]


class WithdrawAccessKeyResponse(BaseModel):
    """Response for withdraw access key use case"""

    status: str
    key_id: str
