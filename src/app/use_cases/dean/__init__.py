"""
Dean Configuration Use Cases
"""

from .get_dean_config_use_case import GetDeanConfigUseCase
from .update_dean_config_use_case import UpdateDeanConfigUseCase
from .generate_backup_code_use_case import GenerateBackupCodeUseCase, generate_backup_code
from .dtos import (
    UpdateDeanConfigCommand,
    DeanConfigResponse,
    UpdateDeanConfigResponse,
    BackupCodeResponse,
)

__all__ = [
    "GetDeanConfigUseCase",
    "UpdateDeanConfigUseCase",
    "GenerateBackupCodeUseCase",
    "generate_backup_code",
    "UpdateDeanConfigCommand",
    "DeanConfigResponse",
    "UpdateDeanConfigResponse",
    "BackupCodeResponse",
]
