# Re-export primary service layer entry points for convenience.
from .platform import (
    create_thread,
    get_messages,
    get_thread,
    get_threads,
    search_users,
    send_message,
    login,
    init_user,
    ensure_system_user,
)
from .webhook import ingest_webhook
from .mapping import map_message, map_thread, map_user

__all__ = [
    # platform
    "create_thread",
    "get_messages",
    "get_thread",
    "get_threads",
    "search_users",
    "send_message",
    "login",
    "init_user",
    "ensure_system_user",
    # webhook
    "ingest_webhook",
    # mapping
    "map_message",
    "map_thread",
    "map_user",
]
