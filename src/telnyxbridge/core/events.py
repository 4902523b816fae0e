"""Fan-out of state-sync events to connected clients.

Every open ``/events`` stream owns a :class:`Subscription` (a bounded
``asyncio.Queue``) registered under the user id it was opened for.
``EventBroker.publish`` delivers to one user's subscriptions when a target is
given and to every subscription otherwise. Delivery is best effort: a full
queue drops the event with a warning, there is no replay.
"""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable

from telnyxbridge.schemas.events import ServerEvent

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Subscription:
    user_id: str | None
    queue: asyncio.Queue = field(repr=False)


class EventBroker:
    def __init__(self, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._subscriptions: dict[str | None, set[Subscription]] = {}

    def subscribe(self, user_id: str | None = None) -> Subscription:
        sub = Subscription(user_id=user_id, queue=asyncio.Queue(maxsize=self._queue_size))
        self._subscriptions.setdefault(user_id, set()).add(sub)
        logger.info("events.subscribe", extra={"user_id": user_id, "subscribers": self.subscriber_count()})
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        subs = self._subscriptions.get(sub.user_id)
        if not subs:
            return
        subs.discard(sub)
        if not subs:
            del self._subscriptions[sub.user_id]
        logger.info("events.unsubscribe", extra={"user_id": sub.user_id, "subscribers": self.subscriber_count()})

    def subscriber_count(self, user_id: str | None = None) -> int:
        if user_id is not None:
            return len(self._subscriptions.get(user_id, ()))
        return sum(len(s) for s in self._subscriptions.values())

    def publish(self, event: ServerEvent, user_id: str | None = None) -> int:
        """Queue ``event`` for ``user_id``'s sessions, or for all sessions.

        Returns the number of subscriptions the event was queued on.
        """
        if user_id is not None:
            targets = list(self._subscriptions.get(user_id, ()))
        else:
            targets = [sub for subs in self._subscriptions.values() for sub in subs]
        delivered = 0
        for sub in targets:
            try:
                sub.queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning(
                    "events.dropped.queue_full",
                    extra={"user_id": sub.user_id, "object_ids": event.object_ids},
                )
        logger.debug(
            "events.publish",
            extra={"target": user_id or "*", "delivered": delivered, "object_name": event.object_name},
        )
        return delivered

    def reset(self) -> None:
        self._subscriptions.clear()


def format_sse(event: ServerEvent) -> str:
    payload = json.dumps(event.model_dump(by_alias=True, mode="json"), separators=(",", ":"))
    return f"event: {event.type.value}\ndata: {payload}\n\n"


HEARTBEAT_FRAME = ": heartbeat\n\n"


async def event_stream(
    sub: Subscription,
    is_disconnected: Callable[[], Awaitable[bool]],
    heartbeat: float,
) -> AsyncIterator[str]:
    """Yield SSE frames for ``sub`` until the client goes away.

    Writes a heartbeat comment whenever no event arrived within ``heartbeat``
    seconds. The caller owns the subscription and must unsubscribe it.
    """
    yield HEARTBEAT_FRAME
    while not await is_disconnected():
        try:
            event = await asyncio.wait_for(sub.queue.get(), timeout=heartbeat)
        except asyncio.TimeoutError:
            yield HEARTBEAT_FRAME
            continue
        yield format_sse(event)
