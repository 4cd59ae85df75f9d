"""Package configuration using pydantic-settings."""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from benefit_rules.core import constants


class Settings(BaseSettings):
    """
    Rule thresholds and outcomes with environment variable support.

    Settings are opt-in: the package-level employee_rate and
    disability_amount always use the built-in defaults. Pass an instance to
    build_default_policy() to evaluate with configured thresholds.

    Environment variables use the BENEFIT_RULES_ prefix, for example
    BENEFIT_RULES_DISABILITY_MAX_MONTHS=6. A .env file is only read when
    passed explicitly as Settings(_env_file=".env").
    """

    # Employee rate rule
    VACATION_RATE_MIN_SENIORITY: int = Field(
        default=constants.VACATION_RATE_MIN_SENIORITY, ge=0
    )
    FULL_RATE: Decimal = constants.FULL_RATE
    REDUCED_RATE: Decimal = constants.REDUCED_RATE

    # Disability amount rule
    DISABILITY_MIN_SENIORITY: int = Field(
        default=constants.DISABILITY_MIN_SENIORITY, ge=0
    )
    DISABILITY_MAX_MONTHS: int = Field(default=constants.DISABILITY_MAX_MONTHS, ge=0)
    DISABILITY_AMOUNT: Decimal = constants.DISABILITY_AMOUNT

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BENEFIT_RULES_",
        env_file=None,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
