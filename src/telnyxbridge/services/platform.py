"""Platform service layer.

Implements the operations the chat client drives (login, session
re-initialisation, thread / message retrieval, thread creation, user search
and message sending) on top of the repositories and the mapping layer.

Read operations and ``create_thread`` only flush; the router commits.
Operations that notify connected clients (``login`` bootstrap and
``send_message``) commit their own writes first so that subscribers are never
told about rows that could still be rolled back.
"""
from __future__ import annotations

import logging
import uuid
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from telnyxbridge.core.config import Settings, get_settings
from telnyxbridge.core.errors import (
    ExtraNotFoundError,
    ThreadNotFoundError,
    UnsupportedCredentialsError,
    UserNotFoundError,
)
from telnyxbridge.core.events import EventBroker
from telnyxbridge.core.extra import ExtraRegistry
from telnyxbridge.models.clock import as_naive_utc, utcnow
from telnyxbridge.models.message import Message
from telnyxbridge.models.thread import Thread
from telnyxbridge.models.user import User
from telnyxbridge.repositories import message as message_repo
from telnyxbridge.repositories import participant as participant_repo
from telnyxbridge.repositories import thread as thread_repo
from telnyxbridge.repositories import user as user_repo
from telnyxbridge.schemas.events import ServerEvent
from telnyxbridge.schemas.message import MessageContent, MessageRead, MessageSendOptions, UserMessage
from telnyxbridge.schemas.pagination import Paginated, PaginatedWithCursors, PaginationArg
from telnyxbridge.schemas.session import (
    CookieJarCreds,
    CustomCreds,
    JsCodeCreds,
    LoginCreds,
    PasswordCreds,
    SerializedSession,
)
from telnyxbridge.schemas.thread import ThreadRead
from telnyxbridge.schemas.user import CurrentUser, UserRead
from telnyxbridge.services.mapping import map_message, map_thread, map_user

logger = logging.getLogger("telnyxbridge.platform")

__all__ = [
    "create_thread",
    "get_messages",
    "get_thread",
    "get_threads",
    "search_users",
    "send_message",
    "login",
    "init_user",
    "ensure_system_user",
    "ensure_system_thread",
    "message_event",
]

# Credential bag keys only meaningful to the transport, never cached
TRANSPORT_ONLY_EXTRA_KEYS = ("baseURL",)


def message_event(thread_id: str, messages: Sequence[MessageRead]) -> ServerEvent:
    return ServerEvent(
        object_name="message",
        mutation_type="upsert",
        object_ids={"threadID": thread_id},
        entries=[m.model_dump(by_alias=True, mode="json") for m in messages],
    )


async def ensure_system_user(session: AsyncSession, settings: Settings | None = None) -> User:
    """Return the system account row, creating it on first use."""
    settings = settings or get_settings()
    user = await user_repo.get_by_id(session, settings.system_user_id)
    if user is not None:
        return user
    logger.info("platform.system_user.create", extra={"user_id": settings.system_user_id})
    return await user_repo.create(
        session,
        id=settings.system_user_id,
        full_name=settings.system_user_name,
        img_url=settings.system_img_url,
        is_self=False,
    )


async def ensure_system_thread(
    session: AsyncSession, settings: Settings | None = None
) -> tuple[Thread, Message | None]:
    """Return the system thread, creating it on first use.

    A new thread gets the system account as its only participant and the
    welcome message, which is returned alongside so the caller can publish it
    after committing. For an existing thread the second item is None.
    """
    settings = settings or get_settings()
    thread = await thread_repo.get_by_id(session, settings.system_thread_id)
    if thread is not None:
        return thread, None

    await ensure_system_user(session, settings)
    now = utcnow()
    thread = await thread_repo.create(
        session,
        id=settings.system_thread_id,
        type="single",
        timestamp=now,
        title=settings.system_thread_title,
        img_url=settings.system_img_url,
        is_unread=False,
        is_read_only=True,
    )
    await participant_repo.add_many(session, thread_id=thread.id, user_ids=[settings.system_user_id])
    (welcome_row,) = await message_repo.create_many(
        session,
        [
            {
                "id": str(uuid.uuid4()),
                "thread_id": thread.id,
                "sender_id": settings.action_sender_id,
                "text": settings.welcome_text,
                "timestamp": now,
                "seen": False,
                "is_delivered": False,
                "is_sender": False,
                "is_action": True,
            }
        ],
    )
    logger.info("platform.system_thread.create", extra={"thread_id": thread.id})
    return thread, welcome_row


async def create_thread(
    session: AsyncSession,
    *,
    extras: ExtraRegistry,
    user_ids: Sequence[str],
    current_user_id: str,
    title: str | None = None,
    message_text: str | None = None,
) -> ThreadRead:
    """Create a "single" thread with the first of ``user_ids``.

    The acting user must have a registered Extra and the target must be a
    stored user; both checks happen before anything is written.
    ``message_text`` is accepted but not sent.
    """
    if extras.get(current_user_id) is None:
        raise ExtraNotFoundError(current_user_id)
    if not user_ids:
        raise ValueError("user_ids must contain at least one user id")
    target_id = user_ids[0]
    target = await user_repo.get_by_id(session, target_id)
    if target is None:
        raise UserNotFoundError(target_id)

    thread = await thread_repo.create(
        session,
        id=str(uuid.uuid4()),
        type="single",
        timestamp=utcnow(),
        title=title or None,
        is_unread=False,
        is_read_only=False,
    )
    await participant_repo.add_many(session, thread_id=thread.id, user_ids=[target_id])
    logger.info(
        "platform.thread.create",
        extra={"thread_id": thread.id, "current_user_id": current_user_id, "target_user_id": target_id},
    )
    return ThreadRead(
        id=thread.id,
        type="single",
        timestamp=thread.timestamp,
        title=thread.title,
        img_url=thread.img_url,
        is_unread=False,
        is_read_only=False,
        messages=Paginated[MessageRead](items=[], has_more=False),
        participants=Paginated[UserRead](items=[map_user(target)], has_more=False),
    )


async def get_messages(
    session: AsyncSession,
    *,
    thread_id: str,
    current_user_id: str,
    pagination: PaginationArg | None = None,
) -> Paginated[MessageRead]:
    # pagination is not implemented: always the full list, has_more False
    rows = await message_repo.select_messages(session, thread_id)
    return Paginated[MessageRead](items=[map_message(r) for r in rows], has_more=False)


async def get_thread(session: AsyncSession, *, thread_id: str, current_user_id: str) -> ThreadRead:
    row = await thread_repo.select_thread(session, thread_id, current_user_id)
    if row is None:
        raise ThreadNotFoundError(thread_id)
    return map_thread(row)


async def get_threads(
    session: AsyncSession,
    *,
    inbox_name: str,
    current_user_id: str,
    pagination: PaginationArg | None = None,
) -> PaginatedWithCursors[ThreadRead]:
    rows = await thread_repo.select_threads(session, current_user_id)
    return PaginatedWithCursors[ThreadRead](
        items=[map_thread(r) for r in rows],
        has_more=False,
        oldest_cursor="0",
    )


async def search_users(session: AsyncSession, *, current_user_id: str, typed: str = "") -> list[UserRead]:
    # ``typed`` is not used for filtering; every other user is returned
    rows = await user_repo.select_users(session, current_user_id)
    return [map_user(r) for r in rows]


async def send_message(
    session: AsyncSession,
    *,
    broker: EventBroker,
    user_message: UserMessage,
    thread_id: str,
    content: MessageContent,
    current_user_id: str,
    options: MessageSendOptions | None = None,
) -> MessageRead:
    """Persist the caller's message plus one canned reply; return the reply.

    Both rows go out in a single insert batch. Only the reply is pushed, and
    only to the acting user's sessions.
    """
    settings = get_settings()
    sent_at = as_naive_utc(user_message.timestamp) if user_message.timestamp else utcnow()
    text = user_message.text if user_message.text is not None else content.text
    rows = [
        {
            "id": user_message.id,
            "thread_id": thread_id,
            "sender_id": current_user_id,
            "text": text,
            "timestamp": sent_at,
            "seen": True,
            "is_delivered": True,
            "is_sender": True,
            "is_action": bool(user_message.is_action),
        },
        {
            "id": str(uuid.uuid4()),
            "thread_id": thread_id,
            "sender_id": settings.responder_id,
            "text": settings.response_text,
            "timestamp": utcnow(),
            "seen": False,
            "is_delivered": True,
            "is_sender": False,
            "is_action": False,
        },
    ]
    _, reply_row = await message_repo.create_many(session, rows)
    await session.commit()

    reply = map_message(reply_row)
    broker.publish(message_event(thread_id, [reply]), user_id=current_user_id)
    logger.info(
        "platform.message.send",
        extra={"thread_id": thread_id, "message_id": user_message.id, "reply_id": reply.id},
    )
    return reply


async def login(
    session: AsyncSession,
    *,
    extras: ExtraRegistry,
    broker: EventBroker,
    creds: LoginCreds,
    user_id: str,
) -> CurrentUser | None:
    """Log ``user_id`` in; ``None`` means no session could be created.

    Only custom credentials are supported. Every other known kind yields
    ``None`` without touching the store; a kind with no branch here raises
    ``UnsupportedCredentialsError``.
    """
    if isinstance(creds, CustomCreds):
        return await _login_custom(session, extras=extras, broker=broker, creds=creds, user_id=user_id)
    if isinstance(creds, (CookieJarCreds, JsCodeCreds, PasswordCreds)):
        logger.info("platform.login.rejected", extra={"user_id": user_id, "kind": creds.kind})
        return None
    raise UnsupportedCredentialsError(getattr(creds, "kind", type(creds).__name__))


async def _login_custom(
    session: AsyncSession,
    *,
    extras: ExtraRegistry,
    broker: EventBroker,
    creds: CustomCreds,
    user_id: str,
) -> CurrentUser:
    settings = get_settings()
    label = creds.custom.get("label")
    current_user = CurrentUser(
        id=user_id,
        username=settings.login_username,
        display_text=str(label) if label is not None else None,
    )

    if await user_repo.get_by_id(session, user_id) is None:
        await user_repo.create(session, id=user_id, full_name=settings.login_username, is_self=True)

    extra = {k: v for k, v in creds.custom.items() if k not in TRANSPORT_ONLY_EXTRA_KEYS}
    extras.set(user_id, extra)

    thread, welcome_row = await ensure_system_thread(session, settings)
    # the first user to log in joins the system thread, also when a webhook created it
    members = await participant_repo.list_user_ids(session, thread.id)
    joined = not set(members) - {settings.system_user_id}
    if joined:
        await participant_repo.add_many(session, thread_id=thread.id, user_ids=[user_id])
    await session.commit()

    if welcome_row is not None:
        broker.publish(message_event(thread.id, [map_message(welcome_row)]))
    logger.info(
        "platform.login.custom",
        extra={"user_id": user_id, "bootstrapped": welcome_row is not None, "joined": joined},
    )
    return current_user


def init_user(extras: ExtraRegistry, serialized: SerializedSession) -> bool:
    """Re-register the Extra of a session serialized before a restart.

    The first registered Extra wins: a second call for the same user leaves
    it untouched and only logs. Returns whether the registry changed.
    """
    user_id = serialized.current_user.id
    if extras.register_if_absent(user_id, serialized.extra):
        logger.info("platform.init.registered", extra={"user_id": user_id})
        return True
    logger.info("platform.init.already_registered", extra={"user_id": user_id})
    return False
