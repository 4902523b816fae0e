from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional
from telnyxbridge.models.user import User

__all__ = [
    "get_by_id",
    "create",
    "select_users",
]


async def get_by_id(session: AsyncSession, id: str) -> Optional[User]:
    res = await session.execute(select(User).where(User.id == id))
    return res.scalar_one_or_none()


async def create(
    session: AsyncSession,
    *,
    id: str,
    full_name: str | None = None,
    img_url: str | None = None,
    is_self: bool = False,
) -> User:
    user = User(id=id, full_name=full_name, img_url=img_url, is_self=is_self)
    session.add(user)
    await session.flush()
    return user


async def select_users(session: AsyncSession, current_user_id: str) -> list[User]:
    """Every user except ``current_user_id`` itself; no pagination."""
    stmt = select(User).where(User.id != current_user_id).order_by(User.id)
    res = await session.execute(stmt)
    return list(res.scalars().all())
