"""In-memory registry of per-user session Extras.

An Extra is the opaque credential bag (API key, label, ...) a client hands
over at login. It is never written to the database: a process restart loses
every entry until each client replays its serialized session through
``/init``.

One registry lives on ``app.state`` and is handed to service calls
explicitly. It is not synchronised; all access happens on the event loop.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

logger = logging.getLogger(__name__)

Extra = dict[str, Any]


class ExtraRegistry:
    def __init__(self) -> None:
        self._extras: dict[str, Extra] = {}

    def get(self, user_id: str) -> Extra | None:
        return self._extras.get(user_id)

    def set(self, user_id: str, extra: Mapping[str, Any]) -> None:
        self._extras[user_id] = dict(extra)

    def delete(self, user_id: str) -> bool:
        """Drop the Extra of ``user_id``; returns whether one was present."""
        return self._extras.pop(user_id, None) is not None

    def register_if_absent(self, user_id: str, extra: Mapping[str, Any]) -> bool:
        """Store ``extra`` unless the user already has one.

        Returns True when the registry changed.
        """
        if user_id in self._extras:
            return False
        self._extras[user_id] = dict(extra)
        return True

    def reset(self) -> None:
        if self._extras:
            logger.info("extra_registry.reset", extra={"dropped": len(self._extras)})
        self._extras.clear()

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._extras

    def __len__(self) -> int:
        return len(self._extras)

    def __iter__(self) -> Iterator[str]:
        return iter(self._extras)
