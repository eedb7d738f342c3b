from __future__ import annotations

from typing import List, Optional, Sequence, Union

from wealthcalc.config import DEFAULT_INFLATION_PCT
from wealthcalc.core.lumpsum import simulate_lumpsum
from wealthcalc.core.sip import simulate_sip
from wealthcalc.core.swp import simulate_swp
from wealthcalc.schemas.projection import StepUp, WithdrawalFrequency
from wealthcalc.schemas.scenarios import (
    CalculatorMode,
    Scenario,
    ScenarioOutcome,
    ScenarioPreset,
)

SCENARIO_PRESETS: Sequence[ScenarioPreset] = (
    ScenarioPreset(scenario=Scenario.CONSERVATIVE, name="Conservative", annual_return_pct=8.0),
    ScenarioPreset(scenario=Scenario.MODERATE, name="Moderate", annual_return_pct=12.0),
    ScenarioPreset(scenario=Scenario.AGGRESSIVE, name="Aggressive", annual_return_pct=15.0),
)


def compare_scenarios(
    mode: CalculatorMode,
    amount: float,
    years: float,
    adjust_for_inflation: bool = False,
    annual_inflation_pct: float = DEFAULT_INFLATION_PCT,
    principal: float = 0.0,
    step_up: Optional[StepUp] = None,
    withdrawal_growth_pct: Optional[float] = None,
    frequency: Union[WithdrawalFrequency, str] = WithdrawalFrequency.MONTHLY,
    presets: Sequence[ScenarioPreset] = SCENARIO_PRESETS,
) -> List[ScenarioOutcome]:
    """
    Run one calculator once per preset, changing nothing but the return rate.

    Every call recomputes from scratch; the presets are the only shared data.
    """
    mode = CalculatorMode(mode)
    outcomes: List[ScenarioOutcome] = []

    for preset in presets:
        rate = preset.annual_return_pct
        depleted_at = None

        if mode == CalculatorMode.SIP:
            result = simulate_sip(amount, years, rate, adjust_for_inflation, annual_inflation_pct, step_up)
            final_value, cash_flow = result.future_value, result.total_contributed
        elif mode == CalculatorMode.LUMPSUM:
            result = simulate_lumpsum(amount, years, rate, adjust_for_inflation, annual_inflation_pct)
            final_value, cash_flow = result.future_value, result.total_contributed
        else:  # SWP
            result = simulate_swp(
                principal,
                amount,
                years,
                rate,
                adjust_for_inflation,
                annual_inflation_pct,
                withdrawal_growth_pct,
                frequency,
            )
            final_value, cash_flow = result.final_corpus, result.total_withdrawn
            depleted_at = result.depleted_at_period

        outcomes.append(
            ScenarioOutcome(
                scenario=preset.scenario,
                name=preset.name,
                annual_return_pct=rate,
                final_value=final_value,
                total_cash_flow=cash_flow,
                depleted_at_period=depleted_at,
                series=list(result.series),
            )
        )

    return outcomes
