"""Preset return scenarios and the side-by-side comparison contract."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wealthcalc.config import DEFAULT_INFLATION_PCT, MAX_HORIZON_YEARS
from wealthcalc.schemas.projection import SeriesPoint, StepUp, SWPSeriesPoint, WithdrawalFrequency


class Scenario(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class CalculatorMode(str, Enum):
    SIP = "sip"
    LUMPSUM = "lumpsum"
    SWP = "swp"


class ScenarioPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    scenario: Scenario
    name: str
    annual_return_pct: float


class ScenarioComparisonRequest(BaseModel):
    """
    amount is the monthly contribution (sip), the principal (lumpsum) or the
    first withdrawal (swp); principal, withdrawal_growth_pct and frequency
    are only read in swp mode.
    """

    model_config = ConfigDict(extra="forbid")

    mode: CalculatorMode = CalculatorMode.SIP
    amount: float = Field(..., ge=0)
    years: int = Field(..., ge=0, le=MAX_HORIZON_YEARS)
    principal: float = Field(0.0, ge=0)
    adjust_for_inflation: bool = False
    annual_inflation_pct: float = Field(DEFAULT_INFLATION_PCT, gt=-100)
    step_up: Optional[StepUp] = None
    withdrawal_growth_pct: Optional[float] = None
    frequency: WithdrawalFrequency = WithdrawalFrequency.MONTHLY

    @model_validator(mode="after")
    def ensure_swp_principal(self) -> "ScenarioComparisonRequest":
        if self.mode == CalculatorMode.SWP and self.principal <= 0:
            raise ValueError("swp mode needs a positive principal")
        return self


class ScenarioOutcome(BaseModel):
    """
    final_value is the future value (sip, lumpsum) or the final corpus (swp);
    total_cash_flow is what was invested or what was withdrawn.
    """

    scenario: Scenario
    name: str
    annual_return_pct: float
    final_value: int
    total_cash_flow: int
    depleted_at_period: Optional[int] = None
    # SWP outcomes keep their per-period withdrawal
    series: List[Union[SWPSeriesPoint, SeriesPoint]]


class ScenarioComparisonResponse(BaseModel):
    outcomes: List[ScenarioOutcome]
