"""
Yearly chart snapshots.

Every calculator samples its period-by-period state at year boundaries into
the same SeriesPoint shape, starting with the year-0 state, so a single
chart adapter can draw any of them.
"""

from __future__ import annotations

from wealthcalc.core.guards import to_currency
from wealthcalc.core.rates import MONTHS_PER_YEAR
from wealthcalc.schemas.projection import SeriesPoint, SWPSeriesPoint


def is_year_end(period: int, periods_per_year: int = MONTHS_PER_YEAR) -> bool:
    return period > 0 and period % periods_per_year == 0


def year_label(period: int, periods_per_year: int = MONTHS_PER_YEAR) -> str:
    if period % periods_per_year == 0:
        return f"Year {period // periods_per_year}"
    return f"Year {period / periods_per_year:.1f}"


def snapshot(
    period: int,
    primary: float,
    secondary: float,
    periods_per_year: int = MONTHS_PER_YEAR,
) -> SeriesPoint:
    return SeriesPoint(
        period=period,
        year=period / periods_per_year,
        label=year_label(period, periods_per_year),
        primary=to_currency(primary),
        secondary=to_currency(secondary),
    )


def swp_snapshot(
    period: int,
    corpus: float,
    total_withdrawn: float,
    withdrawal: float,
    periods_per_year: int = MONTHS_PER_YEAR,
) -> SWPSeriesPoint:
    return SWPSeriesPoint(
        period=period,
        year=period / periods_per_year,
        label=year_label(period, periods_per_year),
        primary=to_currency(corpus),
        secondary=to_currency(total_withdrawn),
        withdrawal=to_currency(withdrawal),
    )
