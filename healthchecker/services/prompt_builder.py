"""Prompt construction for chat replies and medical summaries.

All builders are pure: they take rows already read from the database and
return a fresh :class:`GenerateContentRequest`.
"""

from collections.abc import Sequence

from healthchecker.models.chat_message import ChatMessage
from healthchecker.models.health_report import HealthReport
from healthchecker.schemas.ai_schema import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
)

# Kept literally, including the Hinglish phrase, for client compatibility.
REPORT_TRIGGER_PHRASES: tuple[str, ...] = (
    "generate medical report",
    "medical report",
    "medical summary",
    "health summary",
    "generate report",
    "meri aaj tak ki previous history dekh ke short report bnao",
)

NO_CONVERSATION_HISTORY = "No prior conversation history available."
NO_HEALTH_REPORTS = "No prior health reports available."

MEDICAL_REPORT_TEMPLATE = """You are an AI medical assistant tasked with summarizing a user's health history.
Based *solely* on the following conversation history, please generate a concise medical report or summary.
Do NOT access any external information or personal data not explicitly provided in the conversation.
Focus on extracting and summarizing key symptoms, diagnosed conditions, medical advice given by the AI, and any other relevant health information mentioned by the user or AI.
Present the information as a clear, short report (aim for under 200 words if possible), using bullet points or a structured paragraph format, without any conversational preamble or disclaimers about being an AI or not having memory. Just provide the report.

Conversation History:
---
{history}
---

Medical Report Summary:"""

ENTIRE_REPORT_INSTRUCTION = """You are an AI medical assistant reviewing a user's complete record of health reports.
The reports follow this message, most recent first. Use only the information they contain.
Write a concise overall health summary that covers:
- recurring patterns across reports
- improvements over time
- regressions or worsening conditions
- warnings that need medical attention
- practical suggestions for the user
Keep it under 200 words, use bullet points or short paragraphs, and do not add any conversational preamble or AI disclaimers."""


def is_report_request(text: str) -> bool:
    """Whether a chat message asks for a medical report instead of a reply.

    Plain case-insensitive substring match against REPORT_TRIGGER_PHRASES;
    negations such as "don't generate a medical report" still match.
    """
    lowered = text.lower()
    return any(phrase in lowered for phrase in REPORT_TRIGGER_PHRASES)


def _request(
    contents: list[Content], response_mime_type: str
) -> GenerateContentRequest:
    return GenerateContentRequest(
        contents=contents,
        generation_config=GenerationConfig(response_mime_type=response_mime_type),
    )


def _chronological(history: Sequence[ChatMessage]) -> list[ChatMessage]:
    return sorted(history, key=lambda m: m.timestamp or "")


def build_conversation_request(
    history: Sequence[ChatMessage],
    text: str,
    response_mime_type: str = "text/plain",
) -> GenerateContentRequest:
    """Replay prior messages as alternating user/model turns, then the new text.

    A prior message contributes a ``model`` block only when it has a
    non-empty response.
    """
    contents: list[Content] = []
    for message in _chronological(history):
        contents.append(Content.from_text("user", message.text))
        if message.response:
            contents.append(Content.from_text("model", message.response))
    contents.append(Content.from_text("user", text))
    return _request(contents, response_mime_type)


def render_conversation(history: Sequence[ChatMessage]) -> str:
    """Render chat history as ``User:``/``AI:`` transcript lines."""
    if not history:
        return NO_CONVERSATION_HISTORY
    lines: list[str] = []
    for message in _chronological(history):
        lines.append(f"User: {message.text}")
        if message.response:
            lines.append(f"AI: {message.response}")
    return "\n".join(lines)


def build_medical_report_request(
    history: Sequence[ChatMessage],
    response_mime_type: str = "text/plain",
) -> GenerateContentRequest:
    """Single user block asking for a short report over the whole conversation."""
    prompt = MEDICAL_REPORT_TEMPLATE.format(history=render_conversation(history))
    return _request([Content.from_text("user", prompt)], response_mime_type)


def render_health_report(report: HealthReport) -> str:
    return (
        f"Date: {report.date}\n"
        f"Type: {report.type}\n"
        f"Description: {report.description}"
    )


def build_entire_report_request(
    reports: Sequence[HealthReport],
    response_mime_type: str = "text/plain",
) -> GenerateContentRequest:
    """Instruction block followed by one block per report, in the given order."""
    contents = [Content.from_text("user", ENTIRE_REPORT_INSTRUCTION)]
    if reports:
        contents.extend(
            Content.from_text("user", render_health_report(report))
            for report in reports
        )
    else:
        contents.append(Content.from_text("user", NO_HEALTH_REPORTS))
    return _request(contents, response_mime_type)
