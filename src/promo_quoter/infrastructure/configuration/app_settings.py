from enum import StrEnum
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StoreBackend(StrEnum):
    MEMORY = "memory"
    FILE = "file"


class LogFormat(StrEnum):
    AUTO = "auto"
    JSON = "json"
    CONSOLE = "console"


class AppSettings(BaseSettings):
    """
    Runtime configuration, read from the environment (and ``.env`` when present).
    """
    app_name: str = "Promo Quoter"
    service_name: str = "promo-quoter"
    env: str = Field(default="local", description="local | qa | staging | prod")
    log_level: LogLevel = "INFO"
    log_format: LogFormat = LogFormat.AUTO

    # HTTP server (dev runner)
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # Pricing
    default_promotion_priority: int = Field(default=100, description="Priority used when a stored promotion has none")

    # Confirmation boundary
    confirm_max_attempts: int = Field(default=3, ge=1, description="Attempts per confirmation, first try included")
    confirm_retry_initial_wait: float = Field(default=0.05, ge=0)
    confirm_retry_max_wait: float = Field(default=1.0, ge=0)
    confirm_retry_jitter: float = Field(default=0.05, ge=0)

    # Stores
    store_backend: StoreBackend = Field(
        default=StoreBackend.MEMORY,
        description="Where orders and idempotency keys live; 'file' keeps both under runtime_data_dir",
    )
    runtime_data_dir: Path = Path("./runtime_data")
    seed_data_path: Path | None = Field(default=None, description="YAML file with products and promotions to load at start-up")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def validate_retry_window(self) -> None:
        if self.confirm_retry_initial_wait > self.confirm_retry_max_wait:
            raise ValueError("confirm_retry_initial_wait must not exceed confirm_retry_max_wait.")
