"""HTTP server configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Uvicorn bind settings."""

    host: str
    port: int
    reload: bool = False

    @property
    def bind(self) -> str:
        """host:port string for log lines."""
        return f"{self.host}:{self.port}"
