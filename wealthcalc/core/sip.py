"""
SIP (systematic investment plan) accumulation.

Order of operations per month:
  1) Step the contribution up if a full step-up cycle has elapsed.
  2) Add the contribution to the running value.
  3) Apply the month's growth to the value INCLUDING the new deposit
     (annuity-due: each deposit earns its own month's return).

Starts from zero value and zero invested; records a snapshot at year 0 and
after every completed year.
"""

from __future__ import annotations

from typing import List, Optional, Type, TypeVar

from wealthcalc.config import DEFAULT_INFLATION_PCT
from wealthcalc.core.guards import finite_or_zero, neutral_on_error, to_currency
from wealthcalc.core.rates import derive_rates, total_periods
from wealthcalc.core.schedule import AmountSchedule
from wealthcalc.core.series import is_year_end, snapshot
from wealthcalc.schemas.projection import SeriesPoint, SIPResult, StepUp

R = TypeVar("R", bound=SIPResult)


def return_percentage(invested: float, value: float) -> float:
    if invested <= 0:
        return 0.0
    return finite_or_zero((value - invested) / invested * 100)


def growth_result(
    result_cls: Type[R],
    invested: float,
    value: float,
    series: List[SeriesPoint],
) -> R:
    """Round the terminal state at the boundary; gain is floored at zero for display."""
    return result_cls(
        future_value=to_currency(value),
        total_contributed=to_currency(invested),
        gain=max(0, to_currency(finite_or_zero(value) - finite_or_zero(invested))),
        return_percentage=return_percentage(invested, value),
        series=series,
    )


def _empty_result() -> SIPResult:
    return SIPResult(future_value=0, total_contributed=0, gain=0, return_percentage=0.0, series=[])


@neutral_on_error(_empty_result)
def simulate_sip(
    periodic_contribution: float,
    years: float,
    annual_return_pct: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
    step_up: Optional[StepUp] = None,
) -> SIPResult:
    rate = derive_rates(annual_return_pct, adjust_for_inflation, annual_inflation_pct).periodic_rate
    periods = total_periods(years)

    contributions = AmountSchedule(amount=float(periodic_contribution))
    if step_up is not None:
        contributions.percent = step_up.percent
        contributions.every = step_up.frequency_months

    invested = 0.0
    value = 0.0
    series: List[SeriesPoint] = [snapshot(0, invested, value)]

    for period in range(1, periods + 1):
        contribution = contributions.next_amount()
        invested += contribution
        value = (value + contribution) * (1 + rate)

        if is_year_end(period):
            series.append(snapshot(period, invested, value))

    return growth_result(SIPResult, invested, value, series)
