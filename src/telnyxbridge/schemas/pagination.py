"""Pagination envelopes.

Requests may carry a ``pagination`` argument but it is never applied: every
listing returns all rows with ``hasMore`` false, and thread listings report a
fixed ``oldestCursor`` of ``"0"``.
"""
from typing import Generic, Literal, TypeVar
from pydantic import Field
from .base import WireModel

T = TypeVar("T")


class PaginationArg(WireModel):
    cursor: str | None = None
    direction: Literal["after", "before"] | None = None


class Paginated(WireModel, Generic[T]):
    items: list[T]
    has_more: bool = Field(default=False, alias="hasMore")


class PaginatedWithCursors(Paginated[T], Generic[T]):
    oldest_cursor: str = Field(default="0", alias="oldestCursor")
    newest_cursor: str | None = Field(default=None, alias="newestCursor")
