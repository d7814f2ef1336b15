"""
Access Key Use Cases

Issuance and housekeeping of one-time access keys.
"""

from .create_access_key_use_case import CreateAccessKeyUseCase, generate_access_key_token
from .list_access_keys_use_case import ListAccessKeysUseCase
from .withdraw_access_key_use_case import WithdrawAccessKeyUseCase
from .dtos import AccessKeyInfo, ListAccessKeysResponse, WithdrawAccessKeyResponse

__all__ = [
    "CreateAccessKeyUseCase",
    "ListAccessKeysUseCase",
    "WithdrawAccessKeyUseCase",
    "generate_access_key_token",
    "AccessKeyInfo",
    "ListAccessKeysResponse",
    "WithdrawAccessKeyResponse",
]
