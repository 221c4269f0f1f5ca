"""Application configuration using pydantic-settings."""

import calendar
from decimal import Decimal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Rental Calendar"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Collaborator services
    reservations_api_url: str = "http://localhost:5000/api/reservations"
    articles_api_url: str = "http://localhost:5199/api/articles"
    clients_api_url: str = "http://localhost:5000/api/clients"
    request_timeout_seconds: float = 10.0

    # Calendar
    week_start: int = calendar.SUNDAY  # 0 = Monday ... 6 = Sunday
    currency: str = "DZD"
    upcoming_limit: int = 5
    visible_reservations_per_day: int = 2

    # Revenue badge thresholds (per-day revenue)
    revenue_badge_low: Decimal = Decimal("1000")
    revenue_badge_high: Decimal = Decimal("5000")

    # Frontend
    frontend_url: str = "http://localhost:4200"
    cors_origins: list[str] = [
        "http://localhost:4200",
        "http://localhost:8000",
    ]

    @model_validator(mode="after")
    def _ensure_frontend_in_cors(self) -> "Settings":
        """Ensure the configured frontend_url is always in cors_origins."""
        if self.frontend_url and self.frontend_url not in self.cors_origins:
            self.cors_origins.append(self.frontend_url)
        return self

    @model_validator(mode="after")
    def _validate_calendar(self) -> "Settings":
        """Reject a week start outside Monday..Sunday and inverted badge thresholds."""
        if not 0 <= self.week_start <= 6:
            raise ValueError("WEEK_START must be between 0 (Monday) and 6 (Sunday)")
        if self.revenue_badge_low > self.revenue_badge_high:
            raise ValueError("REVENUE_BADGE_LOW must not exceed REVENUE_BADGE_HIGH")
        return self


settings = Settings()
