"""Password hashing and access token signing."""
from datetime import UTC, datetime, timedelta

import jwt
from passlib.context import CryptContext

from core.config import Settings


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plaintext password for storage."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Returns False (rather than raising) when the stored hash is malformed or
    uses an unknown scheme, so callers can treat it as a credential mismatch.
    """
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    email: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token for a user.

    Args:
        user_id: ID of the authenticated user (stored in the `sub` claim).
        email: User's email (informational `email` claim).
        settings: Application settings providing the secret and algorithm.
        expires_delta: Optional custom lifetime; defaults to JWT_EXPIRE_MINUTES.

    Returns:
        The encoded token string.
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)

    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict:
    """
    Decode and validate an access token.

    Raises:
        jwt.PyJWTError: If the token is malformed, badly signed, or expired.
    """
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
