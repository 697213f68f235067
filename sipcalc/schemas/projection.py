"""Data contracts for the SIP projection endpoints."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from sipcalc.core.projection import ProjectionInput, YearSnapshot
from sipcalc.core.summary import InvestmentSummary, TrendSeries

MAX_YEARS = 100
# keeps the largest schedule (100 years at +100% return and step-up) finite
MAX_AMOUNT = 1e15


class ProjectionRequest(BaseModel):
    """Validated calculator form. Defaults mirror the form's initial values."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialInvestment: float = Field(
        100000.0, ge=0, le=MAX_AMOUNT, description="Lumpsum invested at time zero."
    )
    monthlyContribution: float = Field(
        10000.0, ge=0, le=MAX_AMOUNT, description="Monthly SIP amount in year 1."
    )
    annualStepUpPercent: float = Field(
        10.0,
        ge=-100,
        le=100,
        description="Yearly percentage increase of the monthly SIP.",
    )
    totalYears: int = Field(10, ge=0, le=MAX_YEARS, description="Investment period in years.")
    annualReturnPercent: float = Field(
        12.0,
        ge=-100,
        le=100,
        description="Expected annual return in percent, compounded monthly.",
    )

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(**self.model_dump())


class ProjectionResponse(BaseModel):
    input: ProjectionInput
    schedule: List[YearSnapshot]
    summary: InvestmentSummary
    trend: TrendSeries
