from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # The dashboard's .env carries NEXT_PUBLIC_* keys too; ignore anything unknown.
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="BookingBoost Analytics", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")
    cors_allow_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ALLOW_ORIGINS"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    supabase_url: str = Field(..., alias="SUPABASE_URL")
    supabase_service_role_key: Optional[str] = Field(default=None, alias="SUPABASE_SERVICE_ROLE_KEY")
    supabase_anon_key: Optional[str] = Field(default=None, alias="SUPABASE_ANON_KEY")
    bookings_page_size: int = Field(default=1000, ge=1, alias="BOOKINGS_PAGE_SIZE")

    default_currency: str = Field(default="ZAR", alias="DEFAULT_CURRENCY")
    direct_booking_goal: float = Field(default=70.0, ge=0.0, le=100.0, alias="DIRECT_BOOKING_GOAL")
    average_booking_value: float = Field(default=120.0, ge=0.0, alias="AVERAGE_BOOKING_VALUE")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_cors_origins() -> List[str]:
    return get_settings().cors_origins
