"""Data contracts for the projection calculators."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wealthcalc.config import DEFAULT_INFLATION_PCT, MAX_HORIZON_YEARS


class WithdrawalFrequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEARLY = "half-yearly"
    YEARLY = "yearly"

    @property
    def periods_per_year(self) -> int:
        return {
            WithdrawalFrequency.MONTHLY: 12,
            WithdrawalFrequency.QUARTERLY: 4,
            WithdrawalFrequency.HALF_YEARLY: 2,
            WithdrawalFrequency.YEARLY: 1,
        }[self]


class EffectiveRate(BaseModel):
    """Return rate actually used for compounding, after inflation adjustment."""

    model_config = ConfigDict(frozen=True)

    effective_annual: float
    periodic_rate: float
    periods_per_year: int = 12


class StepUp(BaseModel):
    """Scheduled increase of the periodic contribution, compounding."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    percent: float = Field(..., description="Increase applied at each step, in percent.")
    frequency_months: int = Field(12, ge=1, description="Periods between two steps.")


# -----------------------------
# Requests
# -----------------------------


class _RateInputs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    years: int = Field(..., ge=0, le=MAX_HORIZON_YEARS, description="Horizon in years.")
    annual_return_pct: float = Field(
        ...,
        description="Nominal annual return in percent (12 means 12%). Negative models losses.",
    )
    adjust_for_inflation: bool = False
    annual_inflation_pct: float = Field(DEFAULT_INFLATION_PCT, gt=-100)


class SIPRequest(_RateInputs):
    periodic_contribution: float = Field(..., ge=0, description="Contribution per month.")
    step_up: Optional[StepUp] = None


class LumpsumRequest(_RateInputs):
    principal: float = Field(..., ge=0)


class SWPRequest(_RateInputs):
    """Either periodic_withdrawal or withdrawal_rate_pct sets the first withdrawal."""

    principal: float = Field(..., ge=0)
    periodic_withdrawal: Optional[float] = Field(None, ge=0, description="First period's withdrawal.")
    withdrawal_rate_pct: Optional[float] = Field(
        None,
        ge=0,
        description="First withdrawal as a percentage of the principal.",
    )
    withdrawal_growth_pct: Optional[float] = Field(
        None,
        description="Annual growth of the withdrawal amount, in percent.",
    )
    frequency: WithdrawalFrequency = WithdrawalFrequency.MONTHLY

    @model_validator(mode="after")
    def ensure_one_withdrawal_input(self) -> "SWPRequest":
        if (self.periodic_withdrawal is None) == (self.withdrawal_rate_pct is None):
            raise ValueError("give exactly one of periodic_withdrawal or withdrawal_rate_pct")
        return self

    @property
    def withdrawal_amount(self) -> float:
        if self.periodic_withdrawal is not None:
            return self.periodic_withdrawal
        return self.principal * self.withdrawal_rate_pct / 100


class SustainableWithdrawalRequest(_RateInputs):
    principal: float = Field(..., ge=0)


class GoalRequest(_RateInputs):
    target_amount: float = Field(..., ge=0)


# -----------------------------
# Results
# -----------------------------


class SeriesPoint(BaseModel):
    """Yearly snapshot shared by every calculator.

    primary is the amount invested (or the corpus for SWP), secondary the
    current value (or the cumulative withdrawal for SWP).
    """

    model_config = ConfigDict(frozen=True)

    period: int = Field(..., ge=0)
    year: float = Field(..., ge=0)
    label: str
    primary: int
    secondary: int


class SWPSeriesPoint(SeriesPoint):
    withdrawal: int


class SIPResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    future_value: int
    total_contributed: int
    gain: int
    return_percentage: float
    series: List[SeriesPoint]


class LumpsumResult(SIPResult):
    pass


class SWPResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    final_corpus: int
    total_withdrawn: int
    scheduled_total_withdrawal: int
    depleted_at_period: Optional[int] = None
    depleted_at_year: Optional[float] = None
    corpus_sustainable: bool
    series: List[SWPSeriesPoint]


class GoalResult(SIPResult):
    required_periodic_contribution: float
    inflation_adjusted_target: int
    computable: bool = True


class SustainableWithdrawalResponse(BaseModel):
    monthly_withdrawal: int
