import uuid
from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, ForeignKey, Text, DateTime, Boolean
from telnyxbridge.db.session import Base
from telnyxbridge.models.clock import utcnow

if TYPE_CHECKING:
    from telnyxbridge.models.thread import Thread


class Message(Base):
    """chat message"""
    __tablename__ = "messages"
    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=lambda: str(uuid.uuid4()))
    thread_id: Mapped[str] = mapped_column(ForeignKey("threads.id"), nullable=False, index=True)
    # Not a FK: senders include the responder and the "action" pseudo sender
    sender_id: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str | None] = mapped_column(Text, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    seen: Mapped[bool] = mapped_column(Boolean, default=False)
    is_delivered: Mapped[bool] = mapped_column(Boolean, default=False)
    is_sender: Mapped[bool] = mapped_column(Boolean, default=False)
    is_action: Mapped[bool] = mapped_column(Boolean, default=False)

    thread: Mapped["Thread"] = relationship(back_populates="messages")
