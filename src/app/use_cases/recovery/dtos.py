"""
Recovery Use Case DTOs
"""

from datetime import datetime
from pydantic import BaseModel


class SecurityQuestionResponse(BaseModel):
    """Response for get security question use case"""

    question: str


class RecoveryChallengeResponse(BaseModel):
    """Response for a passed recovery challenge"""

    reset_token: str
    expires_at: datetime


class ResetMasterKeyResponse(BaseModel):
    """Response for reset master key use case"""

    status: str
    message: str
