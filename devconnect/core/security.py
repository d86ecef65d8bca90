"""
Password hashing and access tokens.

Passwords are hashed with bcrypt, which only accepts up to 72 bytes of input;
longer passwords are refused at registration instead of being truncated.
Access tokens are HS256 JWTs carrying the user id in ``sub``.
"""

# Standard library imports
import time
from typing import Any, Dict

# External package imports
import bcrypt
import jwt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from ..domain.exceptions import ValidationError

BCRYPT_ROUNDS = 12
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")


def hash_password(plain_password: str) -> str:
    """
    Hash a password for storage

    Raises:
        ValidationError: If the UTF-8 encoded password exceeds bcrypt's 72-byte limit
    """
    encoded = _password_bytes(plain_password)
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password cannot be longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """False for a wrong password, an over-long password or a malformed stored hash."""
    encoded = _password_bytes(plain_password)
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """Sign ``payload`` with ``iat`` and ``exp`` claims added from settings."""
    settings = get_settings()
    issued_at = int(time.time())
    claims = {
        **payload,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims

    Raises:
        ValueError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {e}") from e
