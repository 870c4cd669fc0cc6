"""Gateway to the generative AI text endpoint."""

from typing import Any

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from healthchecker.schemas.ai_schema import AIResult, GenerateContentRequest

logger = structlog.get_logger()


def to_langchain_messages(request: GenerateContentRequest) -> list[BaseMessage]:
    """Map ``user``/``model`` content blocks onto LangChain chat messages."""
    messages: list[BaseMessage] = []
    for content in request.contents:
        if content.role == "model":
            messages.append(AIMessage(content=content.text))
        else:
            messages.append(HumanMessage(content=content.text))
    return messages


def extract_text(content: Any) -> str:
    """Flatten a chat model's message content into plain text.

    Providers return either a string or a list of content blocks.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks: list[str] = []
        for block in content:
            if isinstance(block, str):
                chunks.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                chunks.append(str(block.get("text", "")))
        return "".join(chunks)
    return str(content)


class AIGateway:
    """Sends a conversation to the chat model and returns its text.

    Failures are reported through :class:`AIResult` rather than raised, so
    callers decide how to surface them. When ``forward_response_mime_type``
    is set, each request's output format is passed to the model call; only
    the Gemini client accepts it.
    """

    def __init__(
        self, llm: BaseChatModel, forward_response_mime_type: bool = False
    ) -> None:
        self._llm = llm
        self._forward_response_mime_type = forward_response_mime_type

    def _invoke_kwargs(self, request: GenerateContentRequest) -> dict[str, Any]:
        if not self._forward_response_mime_type:
            return {}
        return {"response_mime_type": request.generation_config.response_mime_type}

    async def generate(self, request: GenerateContentRequest) -> AIResult:
        messages = to_langchain_messages(request)
        logger.debug(
            "Sending AI request",
            blocks=len(messages),
            generation_config=request.to_wire()["generationConfig"],
        )
        try:
            response = await self._llm.ainvoke(
                messages, **self._invoke_kwargs(request)
            )
        except Exception as exc:
            logger.exception(
                "AI generation failed",
                blocks=len(request.contents),
            )
            return AIResult(error=f"Failed to get response from AI: {exc}")

        text = extract_text(response.content).strip()
        if not text:
            logger.warning("AI returned an empty response", blocks=len(messages))
            return AIResult(error="AI returned an empty response")
        return AIResult(text=text)
