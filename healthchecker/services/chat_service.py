"""Chat history and AI reply orchestration."""

from datetime import datetime

import structlog
from sqlalchemy.exc import SQLAlchemyError

from healthchecker.core.exceptions import AIGatewayError, PersistenceError
from healthchecker.models.chat_message import ChatMessage
from healthchecker.repositories.chat_repo import ChatRepository
from healthchecker.schemas.chat_schema import (
    ChatMessageResponse,
    ChatReplyResponse,
    ChatRequest,
)
from healthchecker.services.ai_gateway import AIGateway
from healthchecker.services.prompt_builder import (
    build_conversation_request,
    build_medical_report_request,
    is_report_request,
)

logger = structlog.get_logger()


def current_timestamp() -> str:
    """Local time as an RFC 3339 string, e.g. ``2026-10-19T10:30:00+05:30``."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


class ChatService:
    """Reads a user's chat history and answers new messages through the AI."""

    def __init__(
        self,
        chat_repo: ChatRepository,
        ai_gateway: AIGateway,
        response_mime_type: str = "text/plain",
    ) -> None:
        self._chat_repo = chat_repo
        self._ai_gateway = ai_gateway
        self._response_mime_type = response_mime_type

    async def get_history(self, user_id: int) -> list[ChatMessageResponse]:
        """Return every stored message of a user, oldest first."""
        try:
            messages = await self._chat_repo.find_messages_by_user(user_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to fetch chat history", user_id=user_id)
            raise PersistenceError("Failed to fetch conversation list") from exc
        return [ChatMessageResponse.model_validate(msg) for msg in messages]

    async def reply(
        self, request: ChatRequest, stamp_timestamp: bool = False
    ) -> ChatReplyResponse:
        """Answer a chat message and store it with the AI response.

        Args:
            request: The incoming message.
            stamp_timestamp: Always record the server time instead of the
                client-supplied timestamp.

        Raises:
            AIGatewayError: The model call failed; nothing is stored.
            PersistenceError: The reply was generated but could not be saved.
        """
        previous = await self._load_previous_messages(request.user_id)

        if is_report_request(request.text):
            logger.info("Medical report requested", user_id=request.user_id)
            payload = build_medical_report_request(
                previous, response_mime_type=self._response_mime_type
            )
        else:
            payload = build_conversation_request(
                previous, request.text, response_mime_type=self._response_mime_type
            )

        result = await self._ai_gateway.generate(payload)
        if not result.ok:
            raise AIGatewayError(result.error or "AI service failed")

        timestamp = (
            current_timestamp()
            if stamp_timestamp or not request.timestamp
            else request.timestamp
        )
        try:
            await self._chat_repo.create_message(
                user_id=request.user_id,
                text=request.text,
                sender=request.sender,
                timestamp=timestamp,
                response=result.text,
            )
        except SQLAlchemyError as exc:
            logger.exception("Error saving chat message", user_id=request.user_id)
            raise PersistenceError("Failed to save chat message.") from exc

        return ChatReplyResponse(response=result.text, user_message=request.text)

    async def _load_previous_messages(self, user_id: int) -> list[ChatMessage]:
        """Read prior messages; a failed read degrades to an empty history."""
        try:
            return await self._chat_repo.find_messages_by_user(user_id)
        except SQLAlchemyError:
            logger.warning(
                "Error fetching previous messages, continuing without history",
                user_id=user_id,
                exc_info=True,
            )
            await self._chat_repo.rollback()
            return []
