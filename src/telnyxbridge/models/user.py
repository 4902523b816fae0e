from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Boolean
from telnyxbridge.db.session import Base


class User(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # data: URLs for the system account logo do not fit a VARCHAR
    img_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_self: Mapped[bool] = mapped_column(Boolean, default=False)
