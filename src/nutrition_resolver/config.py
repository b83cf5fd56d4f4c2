"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEMO_API_KEY = "DEMO_KEY"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str = DEMO_API_KEY
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_timeout_seconds: float = 10.0
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_supabase_cache(self) -> bool:
        """Whether both Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)
