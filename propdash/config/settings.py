"""
Application settings and configuration management using Pydantic BaseSettings.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import Environment


class ListViewConfig(BaseSettings):
    """Defaults shared by every tabular list view."""

    default_page_size: int = Field(default=10, ge=1)
    page_size_options: List[int] = Field(default_factory=lambda: [10, 25, 50, 100])
    max_page_links: int = Field(default=7, ge=3)
    filter_sentinels: List[str] = Field(default_factory=lambda: ["all", ""])

    @field_validator("page_size_options")
    @classmethod
    def validate_page_size_options(cls, v: List[int]) -> List[int]:
        if not v or any(size < 1 for size in v):
            raise ValueError("Page size options must be positive integers")
        return sorted(set(v))

    @field_validator("filter_sentinels")
    @classmethod
    def normalize_sentinels(cls, v: List[str]) -> List[str]:
        return [sentinel.strip().lower() for sentinel in v]

    model_config = SettingsConfigDict(env_prefix="LIST_VIEW_")


class GestureConfig(BaseSettings):
    """Touch gesture configuration."""

    swipe_threshold: float = Field(default=50.0, gt=0)
    haptic_duration_ms: int = Field(default=10, ge=0)
    prevent_default_touch_move: bool = False

    model_config = SettingsConfigDict(env_prefix="GESTURE_")


class AppConfig(BaseSettings):
    """Application configuration settings."""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/propdash.log"
    page_title: str = "Property Dashboard"
    page_icon: str = "🏢"
    data_dir: str = "data"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    model_config = SettingsConfigDict(env_prefix="APP_")


class Settings(BaseSettings):
    """Centralized application settings manager using Pydantic BaseSettings."""

    list_view: ListViewConfig = Field(default_factory=ListViewConfig)
    gestures: GestureConfig = Field(default_factory=GestureConfig)
    app: AppConfig = Field(default_factory=AppConfig)

    def __init__(self, **kwargs):
        self._load_env_file()
        super().__init__(**kwargs)

    @staticmethod
    def _load_env_file() -> None:
        """Load environment variables from .env file."""
        env_file = Path(".env")
        if env_file.exists():
            from dotenv import load_dotenv

            load_dotenv(env_file)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get the cached application settings."""
    return Settings()
