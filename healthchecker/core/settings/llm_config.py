"""LLM provider configuration."""

from typing import Literal

from pydantic import BaseModel, SecretStr


class LLMConfig(BaseModel, frozen=True):
    """LLM provider settings."""

    provider: Literal["google", "openai", "anthropic"]
    google_api_key: SecretStr
    google_model: str
    openai_api_key: SecretStr
    openai_model: str
    anthropic_api_key: SecretStr
    anthropic_model: str
    response_mime_type: str

    @property
    def model_name(self) -> str:
        """Model name for the active provider."""
        match self.provider:
            case "google":
                return self.google_model
            case "openai":
                return self.openai_model
            case _:
                return self.anthropic_model
