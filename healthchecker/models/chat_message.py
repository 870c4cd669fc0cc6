"""Chat message database model."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from healthchecker.core.database import Base


class ChatMessage(Base):
    """A user's chat message together with the AI reply it received."""

    __tablename__ = "chat_messages"
    __table_args__ = (
        Index("ix_chat_messages_user_id_timestamp", "user_id", "timestamp"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    sender: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    # ISO-8601 string as supplied by the client or stamped by the server
    timestamp: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    response: Mapped[str | None] = mapped_column(Text, nullable=True)
