"""Application configuration via pydantic-settings.

Values are read from environment variables (.env file) and fall back to the
defaults below. Settings are organized into logical groups and composed into
a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AffordabilitySettings(BaseSettings):
    """Thresholds used by the affordability engine."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    affordability_threshold: float = Field(
        default=30.0,
        description="Maximum housing cost as a percentage of gross income (30% rule)",
    )
    default_price_mode: str = Field(
        default="median",
        description="Price point used when none is given: q1, median or q3",
    )

    @field_validator("default_price_mode")
    @classmethod
    def validate_price_mode(cls, v: str) -> str:
        """Ensure the price point is one of the known percentiles."""
        valid = {"q1", "median", "q3"}
        lower = v.lower()
        if lower not in valid:
            msg = f"Invalid price mode: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return lower


class MortgageDefaults(BaseSettings):
    """Market defaults applied when mortgage inputs are missing."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    default_interest_rate: float = Field(default=6.5, description="Annual interest rate in percent")
    default_loan_term: int = Field(default=30, description="Loan term in years")
    default_deposit_percent: float = Field(default=20.0, description="Deposit as percent of price")
    default_deposit_amount: float = Field(default=100_000.0, description="Fixed deposit in dollars")


class OwnerCostDefaults(BaseSettings):
    """Typical NSW weekly property ownership costs."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    default_strata: float = Field(default=92.0, description="Weekly strata / body corporate")
    default_council: float = Field(default=46.0, description="Weekly council rates")
    default_water: float = Field(default=23.0, description="Weekly water and sewer")
    default_maintenance: float = Field(default=69.0, description="Weekly maintenance")


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.affordability.affordability_threshold
        settings.mortgage.default_interest_rate
        settings.owner_costs.default_strata
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Logging
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    affordability: AffordabilitySettings = Field(default_factory=AffordabilitySettings)
    mortgage: MortgageDefaults = Field(default_factory=MortgageDefaults)
    owner_costs: OwnerCostDefaults = Field(default_factory=OwnerCostDefaults)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton, import this wherever settings are needed.
settings = Settings()
