from enum import Enum
from typing import Any, Literal
from pydantic import Field
from .base import WireModel


class ServerEventType(str, Enum):
    STATE_SYNC = "state_sync"


class ServerEvent(WireModel):
    """State-sync push: upsert ``entries`` of ``object_name`` under ``object_ids``."""
    type: ServerEventType = ServerEventType.STATE_SYNC
    object_name: Literal["message", "thread", "participant"] = Field(alias="objectName")
    mutation_type: Literal["upsert"] = Field(default="upsert", alias="mutationType")
    object_ids: dict[str, str] = Field(alias="objectIDs")
    entries: list[dict[str, Any]]
