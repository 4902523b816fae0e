"""Inbound webhook ingestion.

Whatever Telnyx posts is stored verbatim (pretty-printed JSON) as a message
of the system thread and pushed to every connected session.
"""
from __future__ import annotations

import json
import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from telnyxbridge.core.config import get_settings
from telnyxbridge.core.events import EventBroker
from telnyxbridge.models.clock import utcnow
from telnyxbridge.repositories import message as message_repo
from telnyxbridge.schemas.message import MessageRead
from telnyxbridge.services.mapping import map_message
from telnyxbridge.services.platform import ensure_system_thread, message_event

logger = logging.getLogger("telnyxbridge.webhook")

__all__ = ["render_payload", "ingest_webhook"]


def render_payload(payload: Any) -> str:
    """Two-space indented JSON plus a trailing newline.

    Known difference from a JavaScript ``JSON.stringify`` rendering: integral
    floats keep their fraction (``1.0`` stays ``1.0``, not ``1``).
    """
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


async def ingest_webhook(session: AsyncSession, *, broker: EventBroker, payload: Any) -> MessageRead:
    """Store ``payload`` in the system thread, creating the thread if needed."""
    settings = get_settings()
    thread, welcome_row = await ensure_system_thread(session, settings)
    (row,) = await message_repo.create_many(
        session,
        [
            {
                "id": str(uuid.uuid4()),
                "thread_id": thread.id,
                "sender_id": settings.system_user_id,
                "text": render_payload(payload),
                "timestamp": utcnow(),
                "seen": True,
                "is_delivered": True,
                "is_sender": False,
                "is_action": False,
            }
        ],
    )
    await session.commit()

    message = map_message(row)
    published = [map_message(welcome_row), message] if welcome_row is not None else [message]
    delivered = broker.publish(message_event(thread.id, published))
    logger.info(
        "webhook.ingest",
        extra={"message_id": message.id, "thread_id": thread.id, "delivered": delivered},
    )
    return message
