"""Service layer for signup and signin."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from core.security import create_access_token, hash_password, verify_password
from models.user import User
from schemas.auth import AuthCredentials
from services.exceptions import EmailAlreadyExistsError, InvalidCredentialsError

logger = logging.getLogger(__name__)

# Verified against when the email is unknown so both failure paths cost one hash check.
_DUMMY_PASSWORD_HASH = hash_password("not-a-real-account-password")


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by (already normalized) email."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def signup(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> tuple[User, str]:
    """
    Register a new user and issue an access token.

    Handles the race where a concurrent request registers the same email
    between our SELECT and INSERT: the unique constraint raises
    IntegrityError, which is reported as EmailAlreadyExistsError.

    Note: Uses flush(), not commit. Session generator handles commit at request end.

    Returns:
        Tuple of (User, access_token).

    Raises:
        EmailAlreadyExistsError: If the email is already registered.
    """
    if await get_user_by_email(db, data.email) is not None:
        raise EmailAlreadyExistsError(data.email)

    user = User(email=data.email, password_hash=hash_password(data.password))
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise EmailAlreadyExistsError(data.email)
    await db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user, create_access_token(user.id, user.email, settings)


async def signin(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> str:
    """
    Verify credentials and issue an access token.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong.
    """
    user = await get_user_by_email(db, data.email)
    password_hash = user.password_hash if user is not None else _DUMMY_PASSWORD_HASH
    password_ok = verify_password(data.password, password_hash)
    if user is None or not password_ok:
        logger.info("Failed signin attempt")
        raise InvalidCredentialsError

    return create_access_token(user.id, user.email, settings)
