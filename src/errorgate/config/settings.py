from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, normalize_error_pages

# Bundled templates (error.html) shipped with the package.
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"
    APP_NAME: str = "errorgate"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/errorgate")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # Queue-backed logging (QueueListener in a background thread)
    LOG_USE_QUEUE: bool = False
    LOG_QUEUE_MAX_SIZE: int = 0  # 0 -> unbounded
    LOG_QUEUE_BLOCKING: bool = False
    LOG_QUEUE_DROP_WARNING_THRESHOLD: int = 100

    # Error pages
    # HTTP status -> redirect URL, e.g. ERROR_PAGES='{"404": "/custom-404"}'
    ERROR_PAGES: dict[int, str] = {}
    ERROR_VIEW_NAME: str = "error"
    TEMPLATES_DIR: Path = DEFAULT_TEMPLATES_DIR

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before the Literal check runs,
        so "debug" in the environment is accepted as "DEBUG".
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_FORMAT environment variable value to lowercase.
        """
        return to_lowercase(v)

    @field_validator("ERROR_PAGES", mode="before")
    def normalize_error_pages(cls, v):
        """
        Validate ERROR_PAGES keys as HTTP statuses and strip the URLs.

        pydantic-settings has already decoded the JSON string from the environment
        at this point, so `v` is a mapping (or None when explicitly unset).

        Raises:
            ValueError: on a non-numeric or out-of-range status key.
        """
        return normalize_error_pages(v)

    model_config = SettingsConfigDict(
        # .env next to the package root (src/errorgate/.env)
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

# Settings are read once per process; the error page registry is built from them at startup.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
