from datetime import datetime
from pydantic import Field
from .base import WireModel
from .pagination import PaginationArg


class MessageRead(WireModel):
    id: str
    timestamp: datetime
    text: str | None = None
    sender_id: str = Field(alias="senderID")
    thread_id: str | None = Field(default=None, alias="threadID")
    is_sender: bool = Field(default=False, alias="isSender")
    seen: bool | None = None
    is_delivered: bool | None = Field(default=None, alias="isDelivered")
    is_action: bool | None = Field(default=None, alias="isAction")


class UserMessage(MessageRead):
    """Message as composed by the client; the server fills in sender and time."""
    sender_id: str | None = Field(default=None, alias="senderID")
    timestamp: datetime | None = None


class MessageContent(WireModel):
    """What the user typed / attached; only ``text`` is interpreted."""
    text: str | None = None
    file_path: str | None = Field(default=None, alias="filePath")
    file_name: str | None = Field(default=None, alias="fileName")
    mime_type: str | None = Field(default=None, alias="mimeType")


class MessageSendOptions(WireModel):
    pending_message_id: str | None = Field(default=None, alias="pendingMessageID")
    quoted_message_id: str | None = Field(default=None, alias="quotedMessageID")
    quoted_message_thread_id: str | None = Field(default=None, alias="quotedMessageThreadID")


class GetMessagesRequest(WireModel):
    thread_id: str = Field(alias="threadID")
    current_user_id: str = Field(alias="currentUserID")
    pagination: PaginationArg | None = None


class SendMessageRequest(WireModel):
    thread_id: str = Field(alias="threadID")
    content: MessageContent = Field(default_factory=MessageContent)
    options: MessageSendOptions | None = None
    user_message: UserMessage = Field(alias="userMessage")
    current_user_id: str = Field(alias="currentUserID")

