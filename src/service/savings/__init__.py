"""
Savings Engine for the Self Savings Planner
"""

from .models import (
    InvestmentMode,
    RawTransaction,
    EnrichedTransaction,
    Period,
    FixedPeriod,
    ExtraPeriod,
    BucketPeriod,
    ValidTransaction,
    InvalidTransaction,
    ValidationOutcome,
    Saving,
    ReturnsProjection,
)
from .settings import SavingsSettings, savings_settings
from .enrichment import enrich
from .validation import validate
from .periods import (
    select_fixed_period,
    apply_fixed_periods,
    apply_extra_periods,
    in_any_bucket,
)
from .tax import calculate_tax, calculate_nps_deduction, calculate_tax_benefit
from .returns import investment_years, annual_rate, real_profit, project

__all__ = [
    # Settings
    "SavingsSettings",
    "savings_settings",
    # Models
    "InvestmentMode",
    "RawTransaction",
    "EnrichedTransaction",
    "Period",
    "FixedPeriod",
    "ExtraPeriod",
    "BucketPeriod",
    "ValidTransaction",
    "InvalidTransaction",
    "ValidationOutcome",
    "Saving",
    "ReturnsProjection",
    # Enrichment & Validation
    "enrich",
    "validate",
    # Period Rules
    "select_fixed_period",
    "apply_fixed_periods",
    "apply_extra_periods",
    "in_any_bucket",
    # Tax
    "calculate_tax",
    "calculate_nps_deduction",
    "calculate_tax_benefit",
    # Returns
    "investment_years",
    "annual_rate",
    "real_profit",
    "project",
]
