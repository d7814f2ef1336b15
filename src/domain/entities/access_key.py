"""
AccessKey Entity

One-time, role-scoped keys the Dean hands to board members.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import AdminRole


class AccessKey(SQLModel, table=True):
    """
    AccessKey entity - single-use bearer key that bootstraps an admin session.

    Business Rules:
    - Token holds 128 random bits and is stored in clear so the Dean
      dashboard can list and share it (no hash-at-rest)
    - is_used flips false -> true exactly once, at first redemption
    - Expired keys (now > expires_at) are never redeemable
    - Redeemed keys are kept for the audit trail
    """

    __tablename__ = "access_keys"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token: str = Field(unique=True, index=True, max_length=64)
    role: AdminRole

    is_used: bool = Field(default=False)
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    issued_by: str = Field(default="Dean", max_length=32)
    bound_device_fingerprint: Optional[str] = Field(default=None, max_length=128)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_access_key_expires_at", "expires_at"),
        Index("idx_access_key_is_used", "is_used"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
