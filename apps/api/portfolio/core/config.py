"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    auth_provider: Literal["mock", "supabase"] = "supabase"
    content_store: Literal["memory", "supabase"] = "supabase"
    blob_provider: Literal["memory", "vercel"] = "vercel"

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_content_table: str = "content"
    supabase_profiles_table: str = "user_profiles"

    blob_read_write_token: str | None = None
    blob_api_url: str = "https://blob.vercel-storage.com"

    content_dir: str = "content/blog"
    content_extensions: tuple[str, ...] = (".mdx", ".md")

    login_rate_limit: int = 5
    login_rate_window_seconds: int = 300

    model_config = SettingsConfigDict(env_prefix="PORTFOLIO_", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
