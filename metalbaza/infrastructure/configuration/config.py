"""
Configuration management for MetalBaza
"""

import threading
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and ``.env``"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database configuration
    database_url: str = Field("sqlite:///data/metalbaza.db", description="SQLAlchemy URL")

    # Application settings
    environment: str = Field("development")
    log_level: str = Field("INFO")
    log_dir: str = Field("logs")

    # Telegram (admin notifications); both optional
    bot_token: Optional[str] = Field(None)
    admin_chat_id: Optional[int] = Field(None)

    # Business settings
    currency: str = Field("UZS", min_length=3, max_length=3)
    default_language: str = Field("uz")

    # HTTP server
    api_host: str = Field("0.0.0.0")
    api_port: int = Field(8000)

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.bot_token and self.admin_chat_id)


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
