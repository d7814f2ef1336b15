"""
Session Registry Use Cases
"""

from .list_sessions_use_case import ListSessionsUseCase
from .revoke_session_use_case import RevokeSessionUseCase
from .dtos import SessionInfo, SessionListResponse, RevokeSessionResponse

__all__ = [
    "ListSessionsUseCase",
    "RevokeSessionUseCase",
    "SessionInfo",
    "SessionListResponse",
    "RevokeSessionResponse",
]
