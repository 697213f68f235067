from __future__ import annotations

import math
from typing import List

from pydantic import BaseModel, ConfigDict


class ProjectionInput(BaseModel):
    """The five numbers behind a step-up SIP.

    No range checks here; the API request schema is the place for those.
    """

    model_config = ConfigDict(frozen=True)

    initialInvestment: float
    monthlyContribution: float
    annualStepUpPercent: float
    totalYears: int
    annualReturnPercent: float


class YearSnapshot(BaseModel):
    # amounts are rounded to whole currency units, the rate to 2 decimals
    model_config = ConfigDict(frozen=True)

    year: int
    contributionThisYear: float
    cumulativeInvested: float
    cumulativeValue: float
    estimatedReturn: float
    annualizedReturnRate: float


MONTHS_PER_YEAR = 12


def _round_half_up(value: float, digits: int = 0) -> float:
    """Round ties towards +infinity; NaN/inf pass through untouched."""
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    # floor(x + 0.5) would carry 0.49999999999999994 up to 1
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return rounded / scale


def annualized_return_rate(total_value: float, total_invested: float, years: int) -> float:
    """
    Simplified "XIRR": geometric mean growth of value over invested capital,
    (value / invested) ** (1 / years) - 1, in percent with 2 decimals.

    It ignores when each contribution went in, so it understates the
    money-weighted return of a SIP.
    """
    if total_invested == 0:
        # 0/0 is treated as flat; any other value over zero capital has no rate
        return 0.0 if total_value == 0 else math.nan
    ratio = total_value / total_invested
    exponent = 1 / years
    if ratio < 0 and not exponent.is_integer():
        # no real root; float ** would hand back a complex number
        return math.nan
    rate = ratio ** exponent - 1
    return _round_half_up(rate * 100, 2)


def project(params: ProjectionInput) -> List[YearSnapshot]:
    """
    Build the year-by-year SIP schedule.

    Order of operations (per month):
      1) Compound the running value by the monthly rate.
      2) Deposit this year's monthly contribution.

    After month 12 a snapshot is recorded and the contribution is stepped up
    for the next year. Running totals keep full precision; only the emitted
    snapshot is rounded.
    """
    monthly_rate = params.annualReturnPercent / 12 / 100

    current_contribution = float(params.monthlyContribution)
    total_invested = float(params.initialInvestment)
    total_value = float(params.initialInvestment)

    rows: List[YearSnapshot] = []
    for year in range(1, params.totalYears + 1):
        for _ in range(MONTHS_PER_YEAR):
            total_value *= 1 + monthly_rate
            total_value += current_contribution
            total_invested += current_contribution

        rows.append(
            YearSnapshot(
                year=year,
                contributionThisYear=_round_half_up(current_contribution),
                cumulativeInvested=_round_half_up(total_invested),
                cumulativeValue=_round_half_up(total_value),
                estimatedReturn=_round_half_up(total_value - total_invested),
                annualizedReturnRate=annualized_return_rate(total_value, total_invested, year),
            )
        )

        current_contribution *= 1 + params.annualStepUpPercent / 100

    return rows


__all__ = [
    "ProjectionInput",
    "YearSnapshot",
    "MONTHS_PER_YEAR",
    "annualized_return_rate",
    "project",
]
