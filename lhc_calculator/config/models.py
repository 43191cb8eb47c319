"""
Pydantic configuration models for LHC Calculator.

These settings only affect presentation and recommendation thresholds; the
regulatory constants in :mod:`lhc_calculator.config.regulatory` are fixed
for the 2024-25 financial year.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from lhc_calculator.domain.enums import Language


class CalculatorSettings(BaseSettings):
    """
    Root calculator configuration.

    Values can be loaded from YAML files and overridden via environment
    variables prefixed with ``LHC_CALC_``.
    """

    default_premium: float = Field(
        default=2000,
        gt=0,
        description="Base annual premium used when none is given",
    )
    default_delay_years: int = Field(
        default=1,
        ge=0,
        le=30,
        description="Delay horizon used when none is given",
    )
    comparison_horizons: list[int] = Field(
        default=[1, 3, 5, 10],
        description="Delay years shown in the scenario comparison",
    )
    consider_threshold: float = Field(
        default=3000,
        ge=0,
        description=(
            "Net cost up to which buying is only suggested for consideration. "
            "Above it the recommendation is to buy now."
        ),
    )
    language: Language = Field(default=Language.ENGLISH, description="Display language")
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Output logs as JSON")

    model_config = {
        "env_prefix": "LHC_CALC_",
        "env_nested_delimiter": "__",
    }

    @field_validator("comparison_horizons")
    @classmethod
    def horizons_not_empty(cls, v: list[int]) -> list[int]:
        """Ensure there is at least one non-negative horizon."""
        if not v:
            raise ValueError("comparison_horizons must not be empty")
        if any(years < 0 for years in v):
            raise ValueError(f"comparison_horizons must be non-negative, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def valid_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level
