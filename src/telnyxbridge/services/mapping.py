"""Row -> platform model translation.

Pure functions from ORM rows to the client-facing schemas. They never touch
the session: thread relations must have been loaded by the repository
(``repositories.thread.select_thread`` / ``select_threads``).

Participant and message collections are wrapped in ``Paginated`` with
``has_more`` always False; pagination is not implemented.
"""
from __future__ import annotations

from telnyxbridge.models.message import Message
from telnyxbridge.models.participant import Participant
from telnyxbridge.models.thread import Thread
from telnyxbridge.models.user import User
from telnyxbridge.schemas.message import MessageRead
from telnyxbridge.schemas.pagination import Paginated
from telnyxbridge.schemas.thread import ThreadRead
from telnyxbridge.schemas.user import UserRead

__all__ = [
    "map_message",
    "map_participant",
    "map_thread",
    "map_user",
]


def map_user(row: User) -> UserRead:
    return UserRead(
        id=row.id,
        full_name=row.full_name,
        img_url=row.img_url,
        is_self=bool(row.is_self),
    )


def map_participant(row: Participant) -> UserRead:
    return map_user(row.user)


def map_message(row: Message) -> MessageRead:
    return MessageRead(
        id=row.id,
        timestamp=row.timestamp,
        text=row.text,
        sender_id=row.sender_id,
        thread_id=row.thread_id,
        is_sender=bool(row.is_sender),
        seen=row.seen,
        is_delivered=row.is_delivered,
        is_action=row.is_action,
    )


def map_thread(row: Thread) -> ThreadRead:
    messages = sorted(row.messages, key=lambda m: (m.timestamp, m.id))
    return ThreadRead(
        id=row.id,
        type=row.type,  # type: ignore[arg-type]
        timestamp=row.timestamp,
        title=row.title,
        img_url=row.img_url,
        is_unread=bool(row.is_unread),
        is_read_only=bool(row.is_read_only),
        messages=Paginated[MessageRead](items=[map_message(m) for m in messages], has_more=False),
        participants=Paginated[UserRead](
            items=[map_participant(p) for p in row.participants], has_more=False
        ),
    )
