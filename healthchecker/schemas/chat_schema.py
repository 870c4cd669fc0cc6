"""Chat request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from healthchecker.schemas.common import EntityId


class ChatRequest(BaseModel):
    """Incoming chat message."""

    user_id: EntityId
    text: str = Field(..., min_length=1)
    sender: str = Field(default="user", max_length=20)
    timestamp: str | None = Field(
        default=None,
        max_length=64,
        description="ISO-8601 client timestamp; the server fills it when omitted",
    )


class ChatReplyResponse(BaseModel):
    """AI reply together with the echoed user message."""

    model_config = ConfigDict(frozen=True)

    response: str
    user_message: str


class ChatMessageResponse(BaseModel):
    """Stored chat message."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    user_id: int
    text: str
    sender: str
    timestamp: str
    response: str | None = None
