"""
DeanSession Entity

Server-side record of a Dean login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

DEAN_ROLE = "Dean"


class DeanSession(SQLModel, table=True):
    """
    DeanSession entity - one row per master key login.

    Business Rules:
    - The Dean authenticates with the master key, so no access key is attached
    - is_active flips to false only through logout or Dean revocation
    - Long lived (365 days by default), never hard-deleted
    """

    __tablename__ = "dean_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    device_info: str = Field(default="Unknown", max_length=512)
    ip_address: Optional[str] = Field(default=None, max_length=64)

    is_active: bool = Field(default=True)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))
    last_used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_dean_session_is_active", "is_active"),
        Index("idx_dean_session_created_at", "created_at"),
    )
