"""Repository helpers for the Thread model.

The ``select_*`` readers eagerly load participants (with their users) and
messages in the same round-trip batch: lazy loading is not available on an
``AsyncSession`` and would raise ``MissingGreenlet`` during mapping.
"""
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from telnyxbridge.models.thread import Thread
from telnyxbridge.models.participant import Participant

__all__ = [
    "get_by_id",
    "create",
    "select_thread",
    "select_threads",
]


def _with_relations(stmt):
    # populate_existing: collections already loaded in this session are refreshed
    return stmt.options(
        selectinload(Thread.participants).selectinload(Participant.user),
        selectinload(Thread.messages),
    ).execution_options(populate_existing=True)


async def get_by_id(session: AsyncSession, thread_id: str) -> Optional[Thread]:
    """Return the bare Thread row (no relations loaded) or None."""
    res = await session.execute(select(Thread).where(Thread.id == thread_id))
    return res.scalar_one_or_none()


async def create(
    session: AsyncSession,
    *,
    id: str,
    timestamp: datetime,
    type: str = "single",
    title: str | None = None,
    img_url: str | None = None,
    is_unread: bool = False,
    is_read_only: bool = False,
) -> Thread:
    thread = Thread(
        id=id,
        type=type,
        timestamp=timestamp,
        title=title,
        img_url=img_url,
        is_unread=is_unread,
        is_read_only=is_read_only,
    )
    session.add(thread)
    await session.flush()
    return thread


async def select_thread(session: AsyncSession, thread_id: str, current_user_id: str) -> Optional[Thread]:
    """Return one thread with participants and messages, or None if absent.

    ``current_user_id`` is accepted for parity with ``select_threads`` but does
    not restrict the lookup: any thread id resolves.
    """
    res = await session.execute(_with_relations(select(Thread).where(Thread.id == thread_id)))
    return res.scalar_one_or_none()


async def select_threads(session: AsyncSession, current_user_id: str) -> list[Thread]:
    """All threads ``current_user_id`` participates in, newest first."""
    stmt = (
        select(Thread)
        .join(Participant, Participant.thread_id == Thread.id)
        .where(Participant.user_id == current_user_id)
        .order_by(Thread.timestamp.desc(), Thread.id)
    )
    res = await session.execute(_with_relations(stmt))
    return list(res.scalars().unique().all())
