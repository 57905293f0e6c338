"""
Tax Modeling for the NPS instrument.

Simplified progressive slabs (marginal, slice based):
    up to 7,00,000        ->  0%
    7,00,000 - 10,00,000  -> 10%
    10,00,000 - 12,00,000 -> 15%
    12,00,000 - 15,00,000 -> 20%
    above 15,00,000       -> 30%

The NPS deduction lowers taxable income; the benefit is the tax saved.
"""

from decimal import Decimal

from .money import ZERO
from .settings import SavingsSettings, savings_settings


def calculate_tax(
    income: Decimal,
    settings: SavingsSettings = savings_settings,
) -> Decimal:
    """
    Calculate tax owed on an annual income.

    Each slab's rate applies only to the slice of income between its
    lower bound and the next slab's lower bound, so the result is
    continuous and non-decreasing in income.

    Args:
        income: Annual taxable income
        settings: Savings settings (uses defaults if not provided)

    Returns:
        Tax owed (0 at or below the tax-free threshold)
    """
    slabs = settings.tax_slabs
    total = ZERO

    for i, (lower, rate) in enumerate(slabs):
        if income <= lower:
            break
        upper = slabs[i + 1][0] if i + 1 < len(slabs) else income
        total += (min(income, upper) - lower) * rate

    return total


def calculate_nps_deduction(
    invested: Decimal,
    annual_income: Decimal,
    settings: SavingsSettings = savings_settings,
) -> Decimal:
    """Deduction = min(invested, 10% of annual income, 2,00,000)."""
    return min(
        invested,
        annual_income * settings.nps_income_percent,
        settings.max_nps_deduction,
    )


def calculate_tax_benefit(
    invested: Decimal,
    annual_income: Decimal,
    settings: SavingsSettings = savings_settings,
) -> Decimal:
    """
    Tax saved by investing ``invested`` in NPS.

    Args:
        invested: Amount invested for the period
        annual_income: Monthly wage * 12
        settings: Savings settings (uses defaults if not provided)

    Returns:
        tax(income) - tax(income - deduction), never negative
    """
    deduction = calculate_nps_deduction(invested, annual_income, settings)
    benefit = calculate_tax(annual_income, settings) - calculate_tax(
        annual_income - deduction, settings
    )
    return max(ZERO, benefit)
