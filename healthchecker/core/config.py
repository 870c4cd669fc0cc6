"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthchecker.core.settings import (
    AppConfig,
    CorsConfig,
    DatabaseConfig,
    LLMConfig,
    ServerConfig,
)

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.llm.provider).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM Provider
    llm_provider: Literal["google", "openai", "anthropic"] = Field(
        default="google",
        description="LLM provider to use",
    )
    llm_response_mime_type: str = Field(
        default="text/plain",
        description="Output format requested from the model",
    )

    # Google Gemini
    google_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Google Generative AI API key",
    )
    google_model: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model name",
    )

    # OpenAI
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model name",
    )

    # Anthropic
    anthropic_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Anthropic API key",
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Anthropic model name",
    )

    # App
    app_name: str = Field(
        default="health-checker",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Server port",
    )
    reload: bool = Field(
        default=False,
        description="Auto-reload on code changes",
    )

    # CORS
    cors_allow_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    # Database
    database_url: SecretStr = Field(
        description="Async database URL (mysql+aiomysql://...)",
    )

    # --- Domain properties ---

    @cached_property
    def llm(self) -> LLMConfig:
        """LLM provider configuration."""
        return LLMConfig(
            provider=self.llm_provider,
            google_api_key=self.google_api_key,
            google_model=self.google_model,
            openai_api_key=self.openai_api_key,
            openai_model=self.openai_model,
            anthropic_api_key=self.anthropic_api_key,
            anthropic_model=self.anthropic_model,
            response_mime_type=self.llm_response_mime_type,
        )

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            version=APP_VERSION,
            env=self.app_env,
            debug=self.debug,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
            reload=self.reload,
        )

    @cached_property
    def cors(self) -> CorsConfig:
        """CORS configuration."""
        return CorsConfig(allow_origins=self.cors_allow_origins)

    @cached_property
    def database(self) -> DatabaseConfig:
        """Database connection configuration."""
        return DatabaseConfig(url=self.database_url)


# Global settings instance
settings = Settings()
