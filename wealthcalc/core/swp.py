"""
SWP (systematic withdrawal plan) drawdown.

Order of operations per period:
  1) Withdraw first, never more than what is left.
  2) If nothing is left, record the depletion period and stop: no growth,
     no further withdrawals.
  3) Otherwise grow the remaining corpus by the period rate.
  4) The next period's withdrawal is raised by the withdrawal growth rate.

With adjust_for_inflation the withdrawals are inflation-linked: they grow
at the inflation rate (unless an explicit withdrawal growth is given) and
the corpus compounds at the nominal return, so inflation is counted once.

Periods are months unless a coarser withdrawal frequency is chosen; the
annual return and withdrawal growth are then divided by the number of
withdrawals per year.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from wealthcalc.config import DEFAULT_INFLATION_PCT
from wealthcalc.core.guards import neutral_on_error, to_currency
from wealthcalc.core.rates import derive_rates, is_degenerate, total_periods
from wealthcalc.core.schedule import AmountSchedule
from wealthcalc.core.series import is_year_end, swp_snapshot
from wealthcalc.schemas.projection import SWPResult, SWPSeriesPoint, WithdrawalFrequency

logger = logging.getLogger(__name__)


def _empty_result() -> SWPResult:
    return SWPResult(
        final_corpus=0,
        total_withdrawn=0,
        scheduled_total_withdrawal=0,
        depleted_at_period=None,
        depleted_at_year=None,
        corpus_sustainable=False,
        series=[],
    )


def scheduled_withdrawals(withdrawal: float, periods: int, growth_per_period: float = 0.0) -> float:
    """Total that would be withdrawn over ``periods`` if the corpus never ran out."""
    if is_degenerate(growth_per_period):
        return withdrawal * periods
    return withdrawal * ((1 + growth_per_period) ** periods - 1) / growth_per_period


@neutral_on_error(_empty_result)
def simulate_swp(
    principal: float,
    periodic_withdrawal: float,
    years: float,
    annual_return_pct: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
    withdrawal_growth_pct: Optional[float] = None,
    frequency: Union[WithdrawalFrequency, str] = WithdrawalFrequency.MONTHLY,
) -> SWPResult:
    if principal <= 0 or periodic_withdrawal <= 0 or years < 0:
        return _empty_result()

    per_year = WithdrawalFrequency(frequency).periods_per_year
    rate = derive_rates(annual_return_pct, periods_per_year=per_year).periodic_rate
    periods = total_periods(years, per_year)
    if withdrawal_growth_pct is None:
        withdrawal_growth_pct = annual_inflation_pct if adjust_for_inflation else 0.0
    growth_pct = withdrawal_growth_pct / per_year

    withdrawals = AmountSchedule(amount=float(periodic_withdrawal), percent=growth_pct, every=1)
    corpus = float(principal)
    total_withdrawn = 0.0
    depleted_at: Optional[int] = None
    series: List[SWPSeriesPoint] = [swp_snapshot(0, corpus, 0.0, 0.0, per_year)]

    for period in range(1, periods + 1):
        withdrawal = withdrawals.next_amount()
        taken = min(corpus, withdrawal)
        corpus -= taken
        total_withdrawn += taken

        if corpus <= 0:
            corpus = 0.0
            depleted_at = period
            series.append(swp_snapshot(period, corpus, total_withdrawn, withdrawal, per_year))
            break

        corpus = max(0.0, corpus * (1 + rate))

        if is_year_end(period, per_year):
            series.append(swp_snapshot(period, corpus, total_withdrawn, withdrawal, per_year))

    if depleted_at is not None:
        logger.debug("corpus of %s depleted at period %s of %s", principal, depleted_at, periods)

    return SWPResult(
        final_corpus=to_currency(corpus),
        total_withdrawn=to_currency(total_withdrawn),
        scheduled_total_withdrawal=to_currency(
            scheduled_withdrawals(float(periodic_withdrawal), periods, growth_pct / 100)
        ),
        depleted_at_period=depleted_at,
        depleted_at_year=depleted_at / per_year if depleted_at is not None else None,
        corpus_sustainable=corpus > 0,
        series=series,
    )


@neutral_on_error(lambda: 0)
def sustainable_withdrawal(
    principal: float,
    years: float,
    annual_return_pct: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
) -> int:
    """
    Level monthly withdrawal that runs the corpus down to zero at the horizon.

    Uses the same withdraw-then-grow ordering as simulate_swp, i.e. the
    annuity-due payment P * r / ((1 - (1 + r) ** -n) * (1 + r)).
    """
    periods = total_periods(years)
    if principal <= 0 or periods == 0:
        return 0

    rate = derive_rates(annual_return_pct, adjust_for_inflation, annual_inflation_pct).periodic_rate
    if is_degenerate(rate):
        return to_currency(principal / periods)
    return to_currency(principal * rate / ((1 - (1 + rate) ** -periods) * (1 + rate)))
