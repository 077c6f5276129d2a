"""Period-by-period accrual shared by the projection and doubling-time simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class PeriodStep:
    period: int
    interest: float
    deposit: float
    balance: float


def iter_periods(
    principal: float,
    rate_per_period: float,
    periods_per_year: int,
    periods: int,
    periodic_deposit: float = 0.0,
    annual_deposit_increase_percent: float = 0.0,
) -> Iterator[PeriodStep]:
    """
    Yield the state after each of ``periods`` compounding periods.

    Order of operations (per period):
      1) Interest accrues on the balance carried in from the previous period.
      2) The current deposit is added at the END of the period.
      3) After every full year of periods the deposit escalates, so the new
         amount applies from the next period on.
    """
    balance = float(principal)
    current_deposit = float(periodic_deposit)
    escalates = periodic_deposit > 0 and annual_deposit_increase_percent > 0
    escalation = 1 + annual_deposit_increase_percent / 100

    for period in range(1, periods + 1):
        interest = balance * rate_per_period
        balance += interest

        applied = 0.0
        if current_deposit > 0:
            balance += current_deposit
            applied = current_deposit

        if escalates and period % periods_per_year == 0:
            current_deposit *= escalation

        yield PeriodStep(period=period, interest=interest, deposit=applied, balance=balance)
