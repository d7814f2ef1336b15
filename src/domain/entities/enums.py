"""
Access Gate Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AdminRole(str, Enum):
    """Board role an access key grants"""

    president = "President"
    vice_president = "Vice President"
    general_secretary = "General Secretary"
    media_head = "Media Head"


class SessionKind(str, Enum):
    """Which session table a session lives in"""

    admin = "admin"
    dean = "dean"


class RecoveryMethod(str, Enum):
    """Challenge used to obtain a reset token"""

    question = "question"
    backup = "backup"


class ResetPurpose(str, Enum):
    """What a reset token may be redeemed for"""

    master_key_reset = "master_key_reset"


class AuditActor(str, Enum):
    """Who triggered an audit event"""

    dean = "dean"
    admin = "admin"
    anonymous = "anonymous"
