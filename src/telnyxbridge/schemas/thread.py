from datetime import datetime
from typing import Literal
from pydantic import Field
from .base import WireModel
from .message import MessageRead
from .pagination import Paginated, PaginationArg
from .user import UserRead

ThreadType = Literal["single"]


class ThreadRead(WireModel):
    id: str
    type: ThreadType = "single"
    timestamp: datetime | None = None
    title: str | None = None
    img_url: str | None = Field(default=None, alias="imgURL")
    is_unread: bool = Field(default=False, alias="isUnread")
    is_read_only: bool = Field(default=False, alias="isReadOnly")
    messages: Paginated[MessageRead]
    participants: Paginated[UserRead]


class CreateThreadRequest(WireModel):
    user_ids: list[str] = Field(alias="userIDs", min_length=1)
    current_user_id: str = Field(alias="currentUserID")
    title: str | None = None
    message_text: str | None = Field(default=None, alias="messageText")


class GetThreadRequest(WireModel):
    thread_id: str = Field(alias="threadID")
    current_user_id: str = Field(alias="currentUserID")


class GetThreadsRequest(WireModel):
    inbox_name: str = Field(default="normal", alias="inboxName")
    current_user_id: str = Field(alias="currentUserID")
    pagination: PaginationArg | None = None
