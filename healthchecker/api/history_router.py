"""Chat history API router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from healthchecker.api.params import UserIdPath
from healthchecker.dependencies import get_chat_service
from healthchecker.schemas.chat_schema import (
    ChatMessageResponse,
    ChatReplyResponse,
    ChatRequest,
)
from healthchecker.schemas.response_schema import error_responses
from healthchecker.services.chat_service import ChatService

router = APIRouter(prefix="/history", tags=["history"])

ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]


@router.post(
    "",
    response_model=ChatReplyResponse,
    responses=error_responses(400, 500),
)
async def create_history(
    request: ChatRequest, service: ChatServiceDep
) -> ChatReplyResponse:
    """Send a message, get the AI reply and store both."""
    return await service.reply(request)


@router.get(
    "/{user_id}",
    response_model=list[ChatMessageResponse],
    responses=error_responses(400, 500),
)
async def get_history(
    user_id: UserIdPath, service: ChatServiceDep
) -> list[ChatMessageResponse]:
    """List a user's chat messages, oldest first."""
    return await service.get_history(user_id)
