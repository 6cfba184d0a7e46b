"""Tests for the user profile service layer."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import hash_password
from models.bookmark import Bookmark
from models.user import User
from schemas.user import UserUpdate
from services import user_service
from services.exceptions import EmailAlreadyExistsError


async def _create_user(db_session: AsyncSession, email: str) -> User:
    user = User(email=email, password_hash=hash_password("pw"))
    db_session.add(user)
    await db_session.flush()
    return user


async def test__update_user__applies_only_set_fields(db_session: AsyncSession) -> None:
    user = await _create_user(db_session, "one@email.com")
    user.last_name = "Keep"
    await db_session.flush()

    updated = await user_service.update_user(
        db_session, user, UserUpdate(first_name="New"),
    )
    assert updated.first_name == "New"
    assert updated.last_name == "Keep"
    assert updated.email == "one@email.com"


async def test__update_user__same_email_is_allowed(db_session: AsyncSession) -> None:
    user = await _create_user(db_session, "one@email.com")

    updated = await user_service.update_user(
        db_session, user, UserUpdate(email="one@email.com"),
    )
    assert updated.email == "one@email.com"


async def test__update_user__email_of_other_user_raises(db_session: AsyncSession) -> None:
    await _create_user(db_session, "taken@email.com")
    user = await _create_user(db_session, "one@email.com")

    with pytest.raises(EmailAlreadyExistsError):
        await user_service.update_user(db_session, user, UserUpdate(email="taken@email.com"))


async def test__delete_user__removes_only_their_bookmarks(db_session: AsyncSession) -> None:
    keeper = await _create_user(db_session, "keeper@email.com")
    leaver = await _create_user(db_session, "leaver@email.com")
    db_session.add_all([
        Bookmark(user_id=keeper.id, title="Keep", link="https://keep.example.com"),
        Bookmark(user_id=leaver.id, title="Go", link="https://go.example.com"),
        Bookmark(user_id=leaver.id, title="Go too", link="https://go2.example.com"),
    ])
    await db_session.flush()

    await user_service.delete_user(db_session, leaver)

    users = await db_session.scalar(select(func.count()).select_from(User))
    titles = (await db_session.execute(select(Bookmark.title))).scalars().all()
    assert users == 1
    assert titles == ["Keep"]
