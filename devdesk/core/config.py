from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Iterable

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class AppSettings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "DevDesk"
    DATA_DIR: Path = Field(default_factory=lambda: PACKAGE_DIR.parent / "data")
    STATIC_DIR: Path | None = None

    # Empty means "SQLite file inside DATA_DIR"; resolved after validation.
    DB_URL: str = Field(default="", validation_alias=AliasChoices("DATABASE_URL", "DB_URL"))

    LOG_LEVEL: str = "INFO"
    # Comma separated in the environment; CORS stays off while empty.
    ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = Field(default_factory=list)
    METRICS_ENABLED: bool = True

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value: Any) -> list[str]:
        if value in (None, "", []):
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Iterable):
            return [str(item).strip() for item in value if str(item).strip()]
        raise TypeError("ALLOWED_ORIGINS must be a comma separated string or list")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return (value or "INFO").strip().upper()

    @model_validator(mode="after")
    def _fill_paths(self) -> "AppSettings":
        if self.STATIC_DIR is None:
            self.STATIC_DIR = PACKAGE_DIR / "static"
        if not self.DB_URL:
            self.DB_URL = f"sqlite:///{self.DATA_DIR / 'devdesk.db'}"
        return self

    @property
    def uses_sqlite(self) -> bool:
        return self.DB_URL.startswith("sqlite")

    @property
    def uses_file_database(self) -> bool:
        return self.uses_sqlite and self.DB_URL not in ("sqlite://", "sqlite:///:memory:")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    settings = AppSettings()
    if settings.uses_file_database:
        settings.DATA_DIR.mkdir(parents=True, exist_ok=True)
    return settings


settings = get_settings()
