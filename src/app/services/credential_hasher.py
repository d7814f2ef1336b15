"""
Credential hashing helpers

Master keys, security answers and backup codes are bcrypt-hashed.
Secrets are SHA-256 digested first so bcrypt's 72-byte input limit never
truncates or rejects a long key. Reset tokens use a plain SHA-256 digest
so they can be looked up by hash.
"""

import base64
import hashlib

import bcrypt

from config import ApplicationConfig


def _prehash(secret: str) -> bytes:
    return base64.b64encode(hashlib.sha256(secret.encode()).digest())


def hash_secret(secret: str) -> str:
    """bcrypt hash with the configured cost factor"""
    hashed = bcrypt.hashpw(_prehash(secret), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))
    return hashed.decode()


def verify_secret(secret: str, secret_hash: str) -> bool:
    """Constant-time comparison against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_prehash(secret), secret_hash.encode())
    except ValueError:
        # Malformed stored hash
        return False


def hash_token(token: str) -> str:
    """SHA-256 hex digest used for reset token lookup"""
    return hashlib.sha256(token.encode()).hexdigest()


def normalize_answer(answer: str) -> str:
    """Security answers are compared trimmed and case-insensitive"""
    return answer.strip().lower()
