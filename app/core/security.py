"""Security utilities for password hashing and JWT."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings
from app.shared.exceptions import ConfigurationException, UnauthenticatedException

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
settings = get_settings()
logger = logging.getLogger(__name__)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify plain password against hashed one."""
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    return pwd_context.hash(password)


def _signing_secret() -> str:
    secret = (settings.secret_key or "").strip()
    if not secret:
        logger.error("SECRET_KEY is not configured, cannot sign or verify tokens")
        raise ConfigurationException("SECRET_KEY is not configured")
    return secret


def create_access_token(subject: str, role: str, **claims: Any) -> str:
    """Create signed access token carrying user id and role."""
    payload: dict[str, Any] = {
        "sub": subject,
        "role": role,
        "type": "access",
        "exp": datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes),
    }
    payload.update(claims)
    return jwt.encode(payload, _signing_secret(), algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and validate JWT token."""
    secret = _signing_secret()
    try:
        return jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise UnauthenticatedException("Token expired") from exc
    except JWTError as exc:
        raise UnauthenticatedException("Invalid token") from exc
