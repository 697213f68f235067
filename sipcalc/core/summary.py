"""Chart-ready views derived from a projection schedule."""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, Field

from sipcalc.core.projection import YearSnapshot

INVESTED_COLOR = "#0088FE"
RETURNS_COLOR = "#00C49F"


class SummarySlice(BaseModel):
    name: str
    value: float
    color: str


class InvestmentSummary(BaseModel):
    """Final-year split between money put in and money earned."""

    totalInvested: float
    estimatedReturn: float
    totalValue: float
    slices: List[SummarySlice]


class TrendSeries(BaseModel):
    """Parallel per-year series for a growth line chart."""

    years: List[int] = Field(default_factory=list)
    totalValue: List[float] = Field(default_factory=list)
    totalInvested: List[float] = Field(default_factory=list)


def summarize(schedule: Sequence[YearSnapshot]) -> InvestmentSummary:
    # an empty schedule still yields both slices, at zero
    last = schedule[-1] if schedule else None
    invested = last.cumulativeInvested if last else 0.0
    returns = last.estimatedReturn if last else 0.0
    value = last.cumulativeValue if last else 0.0

    return InvestmentSummary(
        totalInvested=invested,
        estimatedReturn=returns,
        totalValue=value,
        slices=[
            SummarySlice(name="Total Invested", value=invested, color=INVESTED_COLOR),
            SummarySlice(name="Estimated Returns", value=returns, color=RETURNS_COLOR),
        ],
    )


def trend(schedule: Sequence[YearSnapshot]) -> TrendSeries:
    return TrendSeries(
        years=[row.year for row in schedule],
        totalValue=[row.cumulativeValue for row in schedule],
        totalInvested=[row.cumulativeInvested for row in schedule],
    )
