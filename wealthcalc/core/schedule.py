from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AmountSchedule:
    """
    Running periodic amount that is raised by ``percent`` every ``every`` periods.

    ``next_amount()`` is called once per period, before that period's cash
    flow. The step happens at the start of the period that follows a full
    cycle, so with ``every=12`` the first raise lands on period 13, the
    next on period 25, and so on. Raises compound.
    """

    amount: float
    percent: float = 0.0
    every: int = 0
    periods_since_step: int = 0

    @property
    def active(self) -> bool:
        return self.every > 0 and self.percent != 0

    def next_amount(self) -> float:
        if self.active and self.periods_since_step >= self.every:
            self.amount *= 1 + self.percent / 100
            self.periods_since_step = 0
        self.periods_since_step += 1
        return self.amount
