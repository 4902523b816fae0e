import uuid
from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Boolean, DateTime
from telnyxbridge.db.session import Base
from telnyxbridge.models.clock import utcnow

if TYPE_CHECKING:
    from telnyxbridge.models.message import Message
    from telnyxbridge.models.participant import Participant


class Thread(Base):
    """chat thread"""
    __tablename__ = "threads"
    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=lambda: str(uuid.uuid4()))
    type: Mapped[str] = mapped_column(String(32), default="single")
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    img_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_unread: Mapped[bool] = mapped_column(Boolean, default=False)
    is_read_only: Mapped[bool] = mapped_column(Boolean, default=False)

    participants: Mapped[list["Participant"]] = relationship(back_populates="thread")
    messages: Mapped[list["Message"]] = relationship(
        back_populates="thread", order_by="Message.timestamp"
    )
