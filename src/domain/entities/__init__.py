"""
Access Gate Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AdminRole,
    SessionKind,
    RecoveryMethod,
    ResetPurpose,
    AuditActor,
)

# Export all entities
from .dean_config import DeanConfig, DEAN_CONFIG_ID
from .access_key import AccessKey
from .admin_session import AdminSession
from .dean_session import DeanSession, DEAN_ROLE
from .reset_token import ResetToken
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AdminRole",
    "SessionKind",
    "RecoveryMethod",
    "ResetPurpose",
    "AuditActor",
    # Entities
    "DeanConfig",
    "AccessKey",
    "AdminSession",
    "DeanSession",
    "ResetToken",
    "AuditEvent",
    # Constants
    "DEAN_CONFIG_ID",
    "DEAN_ROLE",
]
