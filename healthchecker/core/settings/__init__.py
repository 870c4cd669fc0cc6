"""Domain-specific configuration models."""

from healthchecker.core.settings.app_config import AppConfig
from healthchecker.core.settings.cors_config import CorsConfig
from healthchecker.core.settings.database_config import DatabaseConfig
from healthchecker.core.settings.llm_config import LLMConfig
from healthchecker.core.settings.server_config import ServerConfig

__all__ = [
    "AppConfig",
    "CorsConfig",
    "DatabaseConfig",
    "LLMConfig",
    "ServerConfig",
]
