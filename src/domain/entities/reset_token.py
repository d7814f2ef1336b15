"""
ResetToken Entity

Short-lived tokens bridging a recovery challenge to the master key reset.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import ResetPurpose


class ResetToken(SQLModel, table=True):
    """
    ResetToken entity - single-use master key reset token.

    Business Rules:
    - Token is SHA-256 hash of a secure random string
    - Expires after RESET_TOKEN_TTL_MINUTES (10 by default)
    - Single-use: marked as used when the new master key is stored
    - Bound to the DeanConfig.key_version it was issued under
    """

    __tablename__ = "reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output
    purpose: ResetPurpose = Field(default=ResetPurpose.master_key_reset)
    key_version: int

    used: bool = Field(default=False)
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    issued_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_reset_token_expires_at", "expires_at"),
        Index("idx_reset_token_used", "used"),
    )
