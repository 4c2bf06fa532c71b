"""Deployment settings using Pydantic settings."""
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HELLO_", env_file=".env", env_file_encoding="utf-8"
    )

    app_name: str = Field(default="Hello World API", description="OpenAPI document title")
    host: str = Field(default="0.0.0.0", description="Bind address for the runner")
    port: int = Field(default=8080, description="Bind port for the runner")
    log_level: str = Field(default="INFO", description="Root log level")


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings instance."""
    return AppSettings()
