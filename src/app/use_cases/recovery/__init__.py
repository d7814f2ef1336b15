"""
Recovery Use Cases

Security question / backup code challenge and master key reset.
"""

from .get_security_question_use_case import GetSecurityQuestionUseCase
from .verify_recovery_challenge_use_case import VerifyRecoveryChallengeUseCase
from .reset_master_key_use_case import ResetMasterKeyUseCase
from .dtos import (
    SecurityQuestionResponse,
    RecoveryChallengeResponse,
    ResetMasterKeyResponse,
)

__all__ = [
    "GetSecurityQuestionUseCase",
    "VerifyRecoveryChallengeUseCase",
    "ResetMasterKeyUseCase",
    "SecurityQuestionResponse",
    "RecoveryChallengeResponse",
    "ResetMasterKeyResponse",
]
