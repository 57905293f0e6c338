"""
Savings Engine Settings for the Self Savings Planner.

This module contains all tunable constants of the savings engine: the
round-up multiple, the instrument rates, the retirement horizon and the
tax slabs used for the NPS deduction benefit.

Environment variables use the SAVINGS_ prefix:
    SAVINGS_NPS_RATE=0.0711
    SAVINGS_RETIREMENT_AGE=60
    SAVINGS_DECIMAL_PRECISION=34

Usage:
    from src.service.savings.settings import savings_settings

    # Use default settings (loaded from env)
    multiple = savings_settings.rounding_multiple

    # Or create custom settings for testing
    custom = SavingsSettings(retirement_age=65)
"""

import json
from decimal import Decimal
from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SavingsSettings(BaseSettings):
    """
    Configurable parameters for enrichment, validation and projection.

    All settings can be overridden via environment variables with SAVINGS_ prefix.
    Monetary values are in the single implicit currency unit.
    """

    model_config = SettingsConfigDict(
        env_prefix="SAVINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Round-up ===
    rounding_multiple: Decimal = Field(
        default=Decimal("100"),
        gt=0,
        description="Expenses are rounded up to the next multiple of this value",
    )
    comparison_tolerance: Decimal = Field(
        default=Decimal("1e-9"),
        ge=0,
        description="Absolute tolerance when checking supplied ceiling/remnant",
    )

    # === Arithmetic ===
    decimal_precision: int = Field(
        default=34,
        ge=28,
        description="Significant digits kept by intermediate projection arithmetic",
    )

    # === Instruments ===
    nps_rate: Decimal = Field(
        default=Decimal("0.0711"),
        ge=0,
        description="Annual nominal rate for the NPS pension instrument",
    )
    index_rate: Decimal = Field(
        default=Decimal("0.1449"),
        ge=0,
        description="Annual nominal rate for the index fund instrument",
    )

    # === Horizon ===
    retirement_age: int = Field(
        default=60,
        gt=0,
        description="Investments compound until this age",
    )
    min_investment_years: int = Field(
        default=5,
        gt=0,
        description="Horizon used once the investor is at or past retirement age",
    )

    # === NPS Tax Deduction ===
    nps_income_percent: Decimal = Field(
        default=Decimal("0.10"),
        ge=0,
        le=1,
        description="Share of annual income eligible for the NPS deduction",
    )
    max_nps_deduction: Decimal = Field(
        default=Decimal("200000"),
        ge=0,
        description="Absolute cap on the NPS deduction",
    )

    # === Tax Slabs ===
    tax_slabs_json: str = Field(
        default='[["700000","0.10"],["1000000","0.15"],["1200000","0.20"],["1500000","0.30"]]',
        description=(
            "Progressive slabs as JSON array of [lower_bound, rate]; income up to "
            "the first lower bound is untaxed, each rate applies until the next bound"
        ),
    )

    @field_validator("tax_slabs_json")
    @classmethod
    def validate_slabs_json(cls, v: str) -> str:
        """Validate that slabs JSON is parseable and ascending."""
        try:
            slabs = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(slabs, list) or not slabs:
            raise ValueError("Slabs must be a non-empty list")
        previous = None
        for slab in slabs:
            if not isinstance(slab, list) or len(slab) != 2:
                raise ValueError("Each slab must be [lower_bound, rate]")
            lower, rate = (Decimal(str(x)) for x in slab)
            if lower < 0 or rate < 0:
                raise ValueError(f"Slab values cannot be negative: {slab}")
            if previous is not None and lower <= previous:
                raise ValueError("Slab lower bounds must be strictly ascending")
            previous = lower
        return v

    @property
    def tax_slabs(self) -> List[Tuple[Decimal, Decimal]]:
        """Tax slabs as (lower_bound, marginal_rate) pairs, ascending."""
        return [
            (Decimal(str(lower)), Decimal(str(rate)))
            for lower, rate in json.loads(self.tax_slabs_json)
        ]

    @property
    def tax_free_threshold(self) -> Decimal:
        """Income at or below this value pays no tax."""
        return self.tax_slabs[0][0]


@lru_cache
def get_savings_settings() -> SavingsSettings:
    """Get cached savings settings instance."""
    return SavingsSettings()


savings_settings = get_savings_settings()
