"""
Authentication Use Cases

Login paths, session verification and logout.
"""

from .admin_login_use_case import AdminLoginUseCase
from .dean_login_use_case import DeanLoginUseCase
from .redeem_credential_use_case import RedeemCredentialUseCase
from .verify_session_use_case import VerifySessionUseCase
from .logout_use_case import LogoutUseCase
from .dtos import (
    RequestContext,
    LoginResponse,
    SessionVerification,
    LogoutResponse,
)

__all__ = [
    # Use Cases
    "AdminLoginUseCase",
    "DeanLoginUseCase",
    "RedeemCredentialUseCase",
    "VerifySessionUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "RequestContext",
    # DTOs - Responses
    "LoginResponse",
    "SessionVerification",
    "LogoutResponse",
]
