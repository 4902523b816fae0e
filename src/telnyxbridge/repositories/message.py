"""Repository helpers for the Message model."""

from typing import Any, Mapping, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from telnyxbridge.models.message import Message

__all__ = [
    "get_by_id",
    "create_many",
    "select_messages",
]


async def get_by_id(session: AsyncSession, message_id: str) -> Optional[Message]:
    """Return a Message by id or None if it does not exist."""
    res = await session.execute(select(Message).where(Message.id == message_id))
    return res.scalar_one_or_none()


async def create_many(session: AsyncSession, rows: Sequence[Mapping[str, Any]]) -> list[Message]:
    """Insert several messages in one flush.

    Each row is a mapping of Message column names (``id``, ``thread_id``,
    ``sender_id``, ``text``, ``timestamp``, flags). Returns the persisted
    Messages in input order (flushed, not committed).
    """
    messages = [Message(**row) for row in rows]
    session.add_all(messages)
    await session.flush()
    return messages


async def select_messages(session: AsyncSession, thread_id: str) -> list[Message]:
    """All messages of ``thread_id``, oldest first (id breaks timestamp ties)."""
    stmt = (
        select(Message)
        .where(Message.thread_id == thread_id)
        .order_by(Message.timestamp, Message.id)
    )
    res = await session.execute(stmt)
    return list(res.scalars().all())
