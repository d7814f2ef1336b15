"""
AdminSession Entity

Server-side record of a board member login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import AdminRole


class AdminSession(SQLModel, table=True):
    """
    AdminSession entity - created when an access key is redeemed.

    Business Rules:
    - One access key produces at most one admin session
    - is_active flips to false only through logout or Dean revocation
    - Never hard-deleted (audit trail)
    """

    __tablename__ = "admin_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    role: AdminRole
    access_key_token: Optional[str] = Field(default=None, index=True, max_length=64)

    device_info: str = Field(default="Unknown", max_length=512)  # User-Agent
    ip_address: Optional[str] = Field(default=None, max_length=64)

    is_active: bool = Field(default=True)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))
    last_used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_admin_session_is_active", "is_active"),
        Index("idx_admin_session_created_at", "created_at"),
    )
