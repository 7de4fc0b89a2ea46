from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Client Helpers API"
    log_level: str = "INFO"
    platform_header: str = "x-platform"
    client_type_header: str = "x-client-type"
    mobile_token: str = "mobile"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CLIENT_HELPERS_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
