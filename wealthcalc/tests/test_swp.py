from __future__ import annotations

from math import isclose

import pytest

from wealthcalc.core.swp import scheduled_withdrawals, simulate_swp, sustainable_withdrawal
from wealthcalc.schemas.projection import WithdrawalFrequency


def test_heavy_withdrawals_deplete_the_corpus_early():
    """
    10 lakh drawn at 50,000/month with 8% growth: the corpus left after
    month 21 is about 19k, so month 22 takes the remainder and stops.
    """
    result = simulate_swp(1_000_000, 50_000, 5, 8)

    assert result.depleted_at_period == 22
    assert isclose(result.depleted_at_year, 22 / 12)
    assert result.final_corpus == 0
    assert result.corpus_sustainable is False
    assert 1_050_000 < result.total_withdrawn < 1_100_000
    assert result.scheduled_total_withdrawal == 50_000 * 60


def test_depletion_point_closes_the_series():
    result = simulate_swp(1_000_000, 50_000, 5, 8)

    assert [p.period for p in result.series] == [0, 12, 22]
    last = result.series[-1]
    assert last.primary == 0
    assert last.secondary == result.total_withdrawn
    assert last.label == "Year 1.8"


def test_sustainable_plan_keeps_yearly_points():
    result = simulate_swp(1_000_000, 5_000, 10, 8)

    assert result.depleted_at_period is None
    assert result.corpus_sustainable is True
    assert result.final_corpus > 0
    assert result.total_withdrawn == 5_000 * 120
    assert len(result.series) == 11
    assert result.series[0].primary == 1_000_000
    assert result.series[0].secondary == 0
    assert result.series[0].withdrawal == 0
    assert result.series[-1].primary == result.final_corpus


def test_withdrawal_growth_follows_geometric_schedule():
    result = simulate_swp(1_000_000, 1_000, 1, 0, withdrawal_growth_pct=12)

    # 1000 * (1.01^12 - 1) / 0.01
    assert result.scheduled_total_withdrawal == 12_683
    assert result.total_withdrawn == 12_683
    assert result.series[-1].withdrawal == round(1000 * 1.01 ** 11)


def test_scheduled_total_ignores_depletion():
    result = simulate_swp(100_000, 10_000, 2, 0, withdrawal_growth_pct=6)

    assert result.depleted_at_period == 10
    assert result.total_withdrawn == 100_000
    assert result.scheduled_total_withdrawal == round(scheduled_withdrawals(10_000, 24, 0.005))
    assert result.scheduled_total_withdrawal > result.total_withdrawn


def test_scheduled_withdrawals_degenerate_growth_is_linear():
    assert scheduled_withdrawals(1000, 24) == 24_000
    assert scheduled_withdrawals(1000, 24, 1e-7) == 24_000


def test_quarterly_withdrawals():
    result = simulate_swp(100_000, 10_000, 2, 0, frequency=WithdrawalFrequency.QUARTERLY)

    assert result.total_withdrawn == 80_000
    assert result.final_corpus == 20_000
    assert [p.period for p in result.series] == [0, 4, 8]
    assert [p.label for p in result.series] == ["Year 0", "Year 1", "Year 2"]


def test_frequency_accepts_plain_strings():
    assert simulate_swp(100_000, 10_000, 2, 0, frequency="yearly").total_withdrawn == 20_000


@pytest.mark.parametrize(
    "principal, withdrawal",
    [
        (0, 5_000),
        (-10, 5_000),
        (100_000, 0),
    ],
)
def test_missing_principal_or_withdrawal_returns_empty_result(principal, withdrawal):
    result = simulate_swp(principal, withdrawal, 10, 8)

    assert result.series == []
    assert result.final_corpus == 0
    assert result.total_withdrawn == 0
    assert result.scheduled_total_withdrawal == 0
    assert result.depleted_at_period is None


def test_zero_horizon_keeps_principal():
    result = simulate_swp(500_000, 10_000, 0, 8)

    assert result.final_corpus == 500_000
    assert result.total_withdrawn == 0
    assert result.corpus_sustainable is True
    assert len(result.series) == 1


def test_larger_withdrawals_never_help():
    results = [simulate_swp(1_000_000, w, 20, 8) for w in (2_000, 6_000, 8_000, 10_000, 20_000, 80_000)]
    finals = [r.final_corpus for r in results]
    depletion = [r.depleted_at_period or float("inf") for r in results]

    assert finals == sorted(finals, reverse=True)
    assert depletion == sorted(depletion, reverse=True)


@pytest.mark.parametrize("withdrawal", [1_000, 7_500, 12_000, 60_000, 2_000_000])
def test_corpus_is_never_negative(withdrawal):
    result = simulate_swp(1_000_000, withdrawal, 15, -20, withdrawal_growth_pct=10)

    assert result.final_corpus >= 0
    assert all(point.primary >= 0 for point in result.series)


def test_sustainable_withdrawal_runs_out_at_the_horizon():
    amount = sustainable_withdrawal(1_000_000, 20, 8)
    result = simulate_swp(1_000_000, amount, 20, 8)

    assert result.depleted_at_period in (None, 240)
    assert result.final_corpus < amount
    assert simulate_swp(1_000_000, amount * 1.05, 20, 8).depleted_at_period < 240


def test_sustainable_withdrawal_edge_cases():
    assert sustainable_withdrawal(1_000_000, 20, 0) == 4_167
    assert sustainable_withdrawal(0, 20, 8) == 0
    assert sustainable_withdrawal(1_000_000, 0, 8) == 0


def test_inflation_linked_withdrawals_grow_against_nominal_return():
    """
    With inflation adjustment the withdrawal rises by 6%/12 every month and
    the corpus keeps compounding at the nominal 12%.
    """
    result = simulate_swp(1_000_000, 5_000, 2, 12, adjust_for_inflation=True, annual_inflation_pct=6)

    # 5000 * (1.005^24 - 1) / 0.005
    assert result.scheduled_total_withdrawal == 127_160
    assert result.total_withdrawn == 127_160
    assert result.series[1].withdrawal == round(5_000 * 1.005 ** 11)

    flat = simulate_swp(1_000_000, 5_000, 2, 12)
    assert flat.scheduled_total_withdrawal == 120_000
    assert result.final_corpus < flat.final_corpus


def test_explicit_withdrawal_growth_overrides_inflation_link():
    pinned = simulate_swp(
        1_000_000, 5_000, 2, 12, adjust_for_inflation=True, annual_inflation_pct=6, withdrawal_growth_pct=0
    )
    flat = simulate_swp(1_000_000, 5_000, 2, 12)

    assert pinned.scheduled_total_withdrawal == 120_000
    assert pinned.final_corpus == flat.final_corpus
