from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_session_jwt(
    session_id: UUID, kind: str, role: str, expires_at: datetime
) -> str:
    """
    Generate the bearer token handed out at login

    Args:
        session_id: AdminSession or DeanSession UUID
        kind: Session kind ("admin" or "dean")
        role: Role shown to the dashboard
        expires_at: Naive UTC expiry, same as the session row

    Returns:
        JWT token string
    """
    payload = {
        "sub": str(session_id),
        "kind": kind,
        "role": role,
        "exp": expires_at.replace(tzinfo=UTC),
        "iat": datetime.now(UTC),
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
        return payload
    except JWTError:
        return None
