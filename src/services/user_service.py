"""Service layer for the current user's profile."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from models.user import User
from schemas.user import UserUpdate
from services.exceptions import EmailAlreadyExistsError

logger = logging.getLogger(__name__)


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply the submitted profile fields to a user.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        EmailAlreadyExistsError: If the new email belongs to another user.
    """
    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email is not None and new_email != user.email:
        result = await db.execute(
            select(User.id).where(User.email == new_email, User.id != user.id),
        )
        if result.scalar_one_or_none() is not None:
            raise EmailAlreadyExistsError(new_email)

    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise EmailAlreadyExistsError(new_email or user.email)
    await db.refresh(user)
    return user


async def delete_user(db: AsyncSession, user: User) -> None:
    """
    Delete a user together with all of their bookmarks.

    Bookmarks are removed explicitly so the cascade does not depend on the
    database enforcing ON DELETE CASCADE.
    """
    user_id = user.id
    await db.execute(delete(Bookmark).where(Bookmark.user_id == user_id))
    await db.delete(user)
    await db.flush()
    logger.info("Deleted user %s", user_id)
