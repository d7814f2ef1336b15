"""
AuditEvent Entity

Immutable log of every credential lifecycle event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow
from .enums import AuditActor


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of access gate events.

    Business Rules:
    - Immutable (never updated or deleted)
    - session_id is the acting session, null for anonymous steps
      (login attempts, recovery)
    - Metadata never contains plaintext keys, answers or tokens
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor: AuditActor = Field(default=AuditActor.anonymous)
    session_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "access_key_issued"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_action", "action"),
    )
