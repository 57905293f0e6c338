"""
Returns Projection Engine for the Self Savings Planner.

This module orchestrates the complete projection pipeline:
1. Derive the investment horizon from the investor's age
2. Compute ceiling and base remnant for each non-negative expense
3. Apply Q-period rules (fixed override, latest start wins)
4. Apply P-period rules (extras added on top)
5. Sum remnants per K period
6. Compound at the instrument's rate, deflate by inflation and compute
   the NPS tax benefit

All intermediate arithmetic runs in a local decimal context; rounding to
two places only happens on the figures handed back to the caller.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, localcontext
from typing import List, Optional, Sequence

from .models import (
    BucketPeriod,
    ExtraPeriod,
    FixedPeriod,
    InvestmentMode,
    RawTransaction,
    ReturnsProjection,
    Saving,
)
from .money import HUNDRED, ONE, ZERO, round_money, round_up_to_multiple
from .periods import apply_extra_periods, apply_fixed_periods
from .settings import SavingsSettings, savings_settings
from .tax import calculate_tax_benefit

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class _Remnant:
    date: Optional[datetime]
    amount: Decimal


def investment_years(
    age: int,
    settings: SavingsSettings = savings_settings,
) -> int:
    """
    Number of years the savings compound.

    Investors below retirement age invest until retirement; everyone else
    gets the minimum horizon.
    """
    if age < settings.retirement_age:
        return settings.retirement_age - age
    return settings.min_investment_years


def annual_rate(
    mode: InvestmentMode,
    settings: SavingsSettings = savings_settings,
) -> Decimal:
    """Annual nominal rate of an instrument."""
    if mode is InvestmentMode.NPS:
        return settings.nps_rate
    return settings.index_rate


def real_profit(
    principal: Decimal,
    rate: Decimal,
    inflation: Decimal,
    years: int,
) -> Decimal:
    """
    Inflation-adjusted gain of a compounded principal.

    Args:
        principal: Amount invested
        rate: Annual nominal rate as a fraction (0.0711 for 7.11%)
        inflation: Annual inflation as a fraction (0.055 for 5.5%)
        years: Investment horizon

    Returns:
        principal * (1 + rate)^years / (1 + inflation)^years - principal
    """
    future_value = principal * (ONE + rate) ** years
    real_value = future_value / (ONE + inflation) ** years
    return real_value - principal


def project(
    age: int,
    wage: Decimal,
    inflation: Decimal,
    fixed_periods: Optional[Sequence[FixedPeriod]],
    extra_periods: Optional[Sequence[ExtraPeriod]],
    bucket_periods: Optional[Sequence[BucketPeriod]],
    transactions: Optional[Sequence[RawTransaction]],
    mode: InvestmentMode = InvestmentMode.NPS,
    settings: SavingsSettings = savings_settings,
) -> ReturnsProjection:
    """
    Project the returns of investing every expense's remnant.

    Transactions without an amount or with a negative amount are left out
    of every total. A transaction without a date still counts toward the
    totals but falls in no period.

    Args:
        age: Investor's age in years
        wage: Monthly wage (annual income = wage * 12)
        inflation: Annual inflation in percent (5.5 for 5.5%)
        fixed_periods: Q periods, in input order
        extra_periods: P periods, in input order
        bucket_periods: K periods; one result per K, in input order
        transactions: Raw expenses
        mode: Instrument to project with
        settings: Savings settings (uses defaults if not provided)

    Returns:
        ReturnsProjection with totals and per-bucket savings, rounded to cents
    """
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision

        years = investment_years(age, settings)
        rate = annual_rate(mode, settings)
        inflation_rate = inflation / HUNDRED
        annual_income = wage * MONTHS_PER_YEAR

        remnants: List[_Remnant] = []
        total_amount = ZERO
        total_ceiling = ZERO

        for txn in transactions or ():
            if txn.amount is None or txn.amount < ZERO:
                continue

            ceiling = round_up_to_multiple(txn.amount, settings.rounding_multiple)
            total_amount += txn.amount
            total_ceiling += ceiling

            remnant = apply_fixed_periods(txn.date, ceiling - txn.amount, fixed_periods)
            remnant = apply_extra_periods(txn.date, remnant, extra_periods)
            remnants.append(_Remnant(txn.date, remnant))

        savings: List[Saving] = []
        for bucket in bucket_periods or ():
            invested = sum(
                (r.amount for r in remnants if bucket.contains(r.date)),
                ZERO,
            )
            profit = real_profit(invested, rate, inflation_rate, years)
            tax_benefit = (
                calculate_tax_benefit(invested, annual_income, settings)
                if mode.tax_benefit_enabled
                else ZERO
            )
            savings.append(
                Saving(
                    period=bucket,
                    amount=round_money(invested),
                    profit=round_money(profit),
                    tax_benefit=round_money(tax_benefit),
                )
            )

        return ReturnsProjection(
            total_transaction_amount=round_money(total_amount),
            total_ceiling=round_money(total_ceiling),
            savings_by_dates=savings,
        )
