from typing import TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey
from telnyxbridge.db.session import Base

if TYPE_CHECKING:
    from telnyxbridge.models.thread import Thread
    from telnyxbridge.models.user import User


class Participant(Base):
    """thread membership (no identity of its own)"""
    __tablename__ = "participants"
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), primary_key=True)
    thread_id: Mapped[str] = mapped_column(ForeignKey("threads.id"), primary_key=True, index=True)

    user: Mapped["User"] = relationship()
    thread: Mapped["Thread"] = relationship(back_populates="participants")
