"""Chat repository for message database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from healthchecker.models.chat_message import ChatMessage


class ChatRepository:
    """Encapsulates chat message database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_messages_by_user(self, user_id: int) -> list[ChatMessage]:
        """Retrieve all messages of a user in chronological order."""
        result = await self._session.execute(
            select(ChatMessage)
            .where(ChatMessage.user_id == user_id)
            .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
        )
        return list(result.scalars().all())

    async def create_message(
        self,
        user_id: int,
        text: str,
        sender: str,
        timestamp: str,
        response: str,
    ) -> ChatMessage:
        """Insert a chat message with its AI response attached."""
        message = ChatMessage(
            user_id=user_id,
            text=text,
            sender=sender,
            timestamp=timestamp,
            response=response,
        )
        self._session.add(message)
        await self._session.flush()
        await self._session.refresh(message)
        return message

    async def rollback(self) -> None:
        """Discard a failed transaction so the session can be reused."""
        await self._session.rollback()
