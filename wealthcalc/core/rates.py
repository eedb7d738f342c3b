from __future__ import annotations

from wealthcalc.config import DEFAULT_INFLATION_PCT
from wealthcalc.schemas.projection import EffectiveRate

MONTHS_PER_YEAR = 12
DEGENERATE_RATE = 1e-5


def fisher_rate(nominal_rate: float, inflation_rate: float) -> float:
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def derive_rates(
    annual_return_pct: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
    periods_per_year: int = MONTHS_PER_YEAR,
) -> EffectiveRate:
    """
    Effective annual rate and the per-period rate every simulator compounds with.

    The periodic rate is a flat division of the annual rate
    (12% a year -> 1% a month), never (1 + r) ** (1 / 12) - 1.
    """
    nominal = annual_return_pct / 100
    if adjust_for_inflation:
        effective = fisher_rate(nominal, annual_inflation_pct / 100)
    else:
        effective = nominal

    return EffectiveRate(
        effective_annual=effective,
        periodic_rate=effective / periods_per_year,
        periods_per_year=periods_per_year,
    )


def is_degenerate(rate: float) -> bool:
    return abs(rate) < DEGENERATE_RATE


def total_periods(years: float, periods_per_year: int = MONTHS_PER_YEAR) -> int:
    return max(0, int(round(years * periods_per_year)))
