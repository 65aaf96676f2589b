"""
Configuration management using Pydantic Settings.
All parameters are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Scoring weights (must sum to 1.0)
AMOUNT_WEIGHT = 0.40
DATE_WEIGHT = 0.30
TEXT_WEIGHT = 0.30

# Selection
MIN_CONFIDENCE = 0.5

# Factor thresholds
AMOUNT_TOLERANCE = 0.02
AMOUNT_CLOSE_THRESHOLD = 0.5
DATE_WINDOW_DAYS = 3
MERCHANT_HIGH_THRESHOLD = 0.7
MERCHANT_MEDIUM_THRESHOLD = 0.4

WEIGHT_SUM_EPSILON = 1e-9


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    app_log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    # Scoring weights
    amount_weight: float = Field(default=AMOUNT_WEIGHT)
    date_weight: float = Field(default=DATE_WEIGHT)
    text_weight: float = Field(default=TEXT_WEIGHT)

    # Selection
    min_confidence: float = Field(default=MIN_CONFIDENCE)

    # Factor thresholds
    amount_tolerance: float = Field(default=AMOUNT_TOLERANCE)
    amount_close_threshold: float = Field(default=AMOUNT_CLOSE_THRESHOLD)
    date_window_days: int = Field(default=DATE_WINDOW_DAYS)
    merchant_high_threshold: float = Field(default=MERCHANT_HIGH_THRESHOLD)
    merchant_medium_threshold: float = Field(default=MERCHANT_MEDIUM_THRESHOLD)

    # Receipt-level parallelism (1 = sequential)
    max_workers: int = Field(default=1)

    @model_validator(mode="after")
    def _check_scoring_parameters(self) -> "Settings":
        total = self.amount_weight + self.date_weight + self.text_weight
        if abs(total - 1.0) > WEIGHT_SUM_EPSILON:
            raise ConfigurationError(
                f"Scoring weights must sum to 1.0, got {total:.6f}"
            )

        for name in (
            "amount_weight",
            "date_weight",
            "text_weight",
            "min_confidence",
            "amount_tolerance",
            "amount_close_threshold",
            "merchant_high_threshold",
            "merchant_medium_threshold",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {value}")

        if self.merchant_medium_threshold > self.merchant_high_threshold:
            raise ConfigurationError(
                "merchant_medium_threshold cannot exceed merchant_high_threshold"
            )
        if self.date_window_days < 1:
            raise ConfigurationError("date_window_days must be at least 1")
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")

        return self

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
