"""Generative AI request and result schemas shared by every prompt builder.

The request mirrors the ``generateContent`` body of the Gemini REST API::

    {
        "contents": [{"role": "user", "parts": [{"text": "..."}]}],
        "generationConfig": {"responseMimeType": "text/plain"}
    }
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "model"]


class Part(BaseModel):
    """A single text fragment of a content block."""

    model_config = ConfigDict(frozen=True)

    text: str


class Content(BaseModel):
    """Role-tagged content block."""

    model_config = ConfigDict(frozen=True)

    role: Role
    parts: list[Part]

    @classmethod
    def from_text(cls, role: Role, text: str) -> "Content":
        return cls(role=role, parts=[Part(text=text)])

    @property
    def text(self) -> str:
        """All parts joined into one string."""
        return "".join(part.text for part in self.parts)


class GenerationConfig(BaseModel):
    """Output format directive."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    response_mime_type: str = Field(default="text/plain", alias="responseMimeType")


class GenerateContentRequest(BaseModel):
    """Conversation payload sent to the AI gateway."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    contents: list[Content]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, alias="generationConfig"
    )

    def to_wire(self) -> dict:
        """Serialize with the camelCase keys the REST endpoint expects."""
        return self.model_dump(by_alias=True)


class AIResult(BaseModel):
    """Generated text, or an error description when generation failed."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
