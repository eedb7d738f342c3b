from __future__ import annotations

from wealthcalc.config import DEFAULT_INFLATION_PCT
from wealthcalc.core.guards import finite_or_zero, neutral_on_error, to_currency
from wealthcalc.core.rates import derive_rates, is_degenerate, total_periods
from wealthcalc.core.sip import return_percentage, simulate_sip
from wealthcalc.schemas.projection import GoalResult


def not_computable() -> GoalResult:
    """Result for inputs that cannot be solved yet (no target or no horizon)."""
    return GoalResult(
        future_value=0,
        total_contributed=0,
        gain=0,
        return_percentage=0.0,
        series=[],
        required_periodic_contribution=0.0,
        inflation_adjusted_target=0,
        computable=False,
    )


def inflate(amount: float, years: float, annual_inflation_pct: float) -> float:
    return amount * (1 + annual_inflation_pct / 100) ** years


@neutral_on_error(not_computable)
def solve_required_contribution(
    target_amount: float,
    years: float,
    annual_return_pct: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
) -> GoalResult:
    """
    Monthly contribution that grows to ``target_amount`` in ``years``.

    Inverts the annuity-due future value used by simulate_sip:
        FV = c * ((1 + r) ** n - 1) / r * (1 + r)
    so feeding the contribution back into simulate_sip at the same return
    lands on the target. Inflation is accounted for by raising the target
    to its future price level; compounding uses the nominal return.
    """
    periods = total_periods(years)
    if target_amount <= 0 or years <= 0 or periods == 0:
        return not_computable()

    if adjust_for_inflation:
        target = inflate(float(target_amount), years, annual_inflation_pct)
    else:
        target = float(target_amount)

    rate = derive_rates(annual_return_pct).periodic_rate
    if is_degenerate(rate):
        contribution = target / periods
    else:
        contribution = target * rate / (((1 + rate) ** periods - 1) * (1 + rate))
    contribution = finite_or_zero(contribution)

    total = contribution * periods
    projection = simulate_sip(contribution, years, annual_return_pct)

    return GoalResult(
        future_value=to_currency(target),
        total_contributed=to_currency(total),
        gain=max(0, to_currency(target - total)),
        return_percentage=return_percentage(total, target),
        series=projection.series,
        required_periodic_contribution=contribution,
        inflation_adjusted_target=to_currency(target),
    )
