"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_anon_key: str
    orders_fanout_limit: int = 8
    auth_users_page_size: int = 1000
    request_timeout_seconds: float = 10.0
    enforce_order_ownership: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def auth_base_url(supabase_url: str) -> str:
    """Return the Supabase Auth base URL for a project URL."""
    return f"{supabase_url.rstrip('/')}/auth/v1"
