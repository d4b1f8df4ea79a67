# policyfolio/config.py
"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation:
- ENVIRONMENT: Runtime mode (development, test, production)
- LOG_LEVEL / LOG_FORMAT: Logging behaviour
- PROJECTION_*, PERFORMANCE_*, UPCOMING_*: Valuation engine tuning
- MONEY_DECIMAL_PLACES / PERCENTAGE_DECIMAL_PLACES: Presentation rounding

The valuation engine itself never rounds. Decimal places configured here are
applied only by the response schemas in policyfolio/schemas/.

Usage:
    from policyfolio.config import settings

    horizon = settings.projection_horizon_months
"""
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables:
        - ENVIRONMENT: Runtime environment (development, test, production)
        - APP_NAME: Application name (default: "Policyfolio")
        - LOG_LEVEL: Logging level (default: "INFO")
        - LOG_FORMAT: "text" or "json" (default: "text")

    Valuation Settings (optional, with sensible defaults):
        - PROJECTION_HORIZON_MONTHS: Max monthly steps in a projection (default: 12)
        - PERFORMANCE_HISTORY_MONTHS: Trailing months in performance history (default: 12)
        - UPCOMING_MATURITIES_LIMIT: Max subscriptions listed as upcoming (default: 5)
        - DECIMAL_PRECISION: Significant digits for engine arithmetic (default: 28)
    """

    environment: Literal["development", "test", "production"] = Field(
        default="development",
        description="Runtime environment (development, test, production)"
    )

    app_name: str = "Policyfolio"

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="Log output format (text for humans, json for aggregation)"
    )

    # =========================================================================
    # VALUATION ENGINE
    # =========================================================================
    projection_horizon_months: int = Field(
        default=12,
        ge=1,
        le=120,
        description="Maximum number of monthly steps in a value projection"
    )
    performance_history_months: int = Field(
        default=12,
        ge=1,
        le=120,
        description="Number of trailing months in portfolio performance history"
    )
    upcoming_maturities_limit: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Maximum number of upcoming maturities returned"
    )
    decimal_precision: int = Field(
        default=28,
        ge=16,
        le=100,
        description="Significant digits used by the Decimal context during valuation"
    )

    # =========================================================================
    # PRESENTATION
    # =========================================================================
    money_decimal_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places for monetary amounts in responses"
    )
    percentage_decimal_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places for percentages in responses"
    )

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level and reject unknown names."""
        normalized = value.upper().strip()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{value}'. "
                f"Valid levels are: {', '.join(VALID_LOG_LEVELS)}"
            )
        return normalized

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


# Create single instance
settings = Settings()
