"""
DeanConfig Entity

Singleton row holding the Dean's credentials.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

DEAN_CONFIG_ID = "config"


class DeanConfig(SQLModel, table=True):
    """
    DeanConfig entity - the Dean's master key and recovery secrets.

    Business Rules:
    - Exactly one row, id="config", created by the seed script
    - Master key, security answer and backup code stored as bcrypt hashes
    - key_version increases on every master key change; reset tokens
      issued for an older version are no longer redeemable
    - Never deleted
    """

    __tablename__ = "dean_config"

    id: str = Field(default=DEAN_CONFIG_ID, primary_key=True, max_length=16)

    master_key_hash: str = Field(max_length=60)  # Bcrypt output
    security_question: str = Field(max_length=255)
    security_answer_hash: str = Field(max_length=60)
    backup_code_hash: str = Field(max_length=60)

    key_version: int = Field(default=1)

    # Timestamps
    last_changed: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
