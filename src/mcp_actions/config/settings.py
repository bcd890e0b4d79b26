"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "mcp-actions"
    app_env: str = "dev"
    executor_base_url: str = "http://127.0.0.1:8787"
    executor_path: str = "/mcp/call"
    transport_timeout_s: float = Field(default=60.0, ge=0.5)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MCP_ACTIONS_",
        extra="ignore",
        env_file=(PROJECT_ROOT / ".env", PROJECT_ROOT / ".env.local"),
        env_file_encoding="utf-8",
    )

    def executor_url(self) -> str:
        path = self.executor_path if self.executor_path.startswith("/") else f"/{self.executor_path}"
        return f"{self.executor_base_url.rstrip('/')}{path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
