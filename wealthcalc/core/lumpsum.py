"""Single upfront investment compounded monthly."""

from __future__ import annotations

from typing import List

from wealthcalc.config import DEFAULT_INFLATION_PCT
from wealthcalc.core.guards import neutral_on_error
from wealthcalc.core.rates import MONTHS_PER_YEAR, derive_rates, total_periods
from wealthcalc.core.series import snapshot
from wealthcalc.core.sip import growth_result
from wealthcalc.schemas.projection import LumpsumResult, SeriesPoint


def _empty_result() -> LumpsumResult:
    return LumpsumResult(future_value=0, total_contributed=0, gain=0, return_percentage=0.0, series=[])


@neutral_on_error(_empty_result)
def simulate_lumpsum(
    principal: float,
    years: float,
    annual_return_pct: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
) -> LumpsumResult:
    rate = derive_rates(annual_return_pct, adjust_for_inflation, annual_inflation_pct).periodic_rate
    periods = total_periods(years)
    principal = float(principal)
    growth = 1 + rate

    series: List[SeriesPoint] = [snapshot(0, principal, principal)]
    value = principal
    for period in range(MONTHS_PER_YEAR, periods + 1, MONTHS_PER_YEAR):
        value *= growth ** MONTHS_PER_YEAR
        series.append(snapshot(period, principal, value))

    future_value = principal * growth ** periods
    return growth_result(LumpsumResult, principal, future_value, series)
