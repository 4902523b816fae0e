from typing import Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from telnyxbridge.models.participant import Participant

__all__ = [
    "add_many",
    "list_user_ids",
]


async def add_many(session: AsyncSession, *, thread_id: str, user_ids: Iterable[str]) -> list[Participant]:
    """Add every user in ``user_ids`` as a member of ``thread_id``."""
    rows = [Participant(user_id=user_id, thread_id=thread_id) for user_id in user_ids]
    session.add_all(rows)
    await session.flush()
    return rows


async def list_user_ids(session: AsyncSession, thread_id: str) -> list[str]:
    res = await session.execute(
        select(Participant.user_id).where(Participant.thread_id == thread_id).order_by(Participant.user_id)
    )
    return list(res.scalars().all())
