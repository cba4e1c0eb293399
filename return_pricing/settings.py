from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rates import PaymentConfig


class PricingSettings(BaseSettings):
    total_cap_policy: Literal["minimum_fare_ceiling", "none"] = Field(
        default="minimum_fare_ceiling",
        description="minimum_fare_ceiling clamps the customer total at $3.99 plus tip; "
        "none charges the full additive total",
    )
    driver_pay_policy: Literal["fixed", "scaled"] = Field(
        default="fixed",
        description="Whether value-capping also scales driver pay by the reduction factor",
    )
    validate_inputs: bool = Field(
        default=True,
        description="Reject negative distance/time/tip/item value and item counts below 1",
    )
    verify_config_integrity: bool = Field(
        default=False,
        description="Check that driver + company shares equal each total rate before calculating",
    )
    enforce_conservation_on_payout: bool = Field(
        default=True,
        description="Refuse to create a payout from an unbalanced breakdown",
    )

    model_config = SettingsConfigDict(env_prefix="PRICING_")


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    rates: PaymentConfig = Field(default_factory=PaymentConfig)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
