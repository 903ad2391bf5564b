"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class AccountsSettings(BaseModel):
    # Simulated latency of the account listing endpoint.
    latency_ms: int = Field(default=1000, ge=0)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Utility Accounts Dashboard"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    accounts: AccountsSettings = AccountsSettings()
    logging: LoggingSettings = LoggingSettings()

    static_dir: Path = Path("utility_dashboard/web/static")
    template_dir: Path = Path("utility_dashboard/web/templates")

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def accounts_latency(self) -> float:
        """Listing delay in seconds."""
        return self.accounts.latency_ms / 1000

    @property
    def log_level(self) -> str:
        return self.logging.level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
