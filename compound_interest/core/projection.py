from __future__ import annotations

from typing import List

from loguru import logger

from compound_interest.core.accumulation import iter_periods
from compound_interest.core.constants import DEFAULT_DOUBLING_CAP_YEARS
from compound_interest.core.doubling import estimate_time_to_double
from compound_interest.schemas.projection import (
    ProjectionInput,
    ProjectionResult,
    YearlyRecord,
)


def project(
    request: ProjectionInput,
    doubling_cap_years: int = DEFAULT_DOUBLING_CAP_YEARS,
) -> ProjectionResult:
    """
    Simulate the balance period by period and aggregate it into yearly rows.

    Conventions:
      - Interest compounds on the balance BEFORE that period's deposit.
      - Deposits are added at the END of each period and escalate once per
        completed year (applied from the next period on).
      - A row is closed at every full year of periods AND at the final
        period, so a fractional duration ends with a partial-year row.
      - Time to double is derived from the request parameters, not from the
        simulated trajectory.

    Values are returned at full precision; rounding is left to the caller.
    """
    doubling = estimate_time_to_double(request, cap_years=doubling_cap_years)

    periods_per_year = int(request.periods_per_year)
    total_periods = request.total_periods

    balance = float(request.principal)
    cumulative_interest = 0.0
    total_deposits = 0.0
    interest_this_year = 0.0
    year = 0
    rows: List[YearlyRecord] = []

    for step in iter_periods(
        principal=request.principal,
        rate_per_period=request.rate_per_period,
        periods_per_year=periods_per_year,
        periods=total_periods,
        periodic_deposit=request.periodic_deposit,
        annual_deposit_increase_percent=request.annual_deposit_increase_percent,
    ):
        balance = step.balance
        cumulative_interest += step.interest
        interest_this_year += step.interest
        total_deposits += step.deposit

        if step.period % periods_per_year == 0 or step.period == total_periods:
            year += 1
            rows.append(
                YearlyRecord(
                    year=year,
                    interest_this_year=interest_this_year,
                    cumulative_interest=cumulative_interest,
                    balance=balance,
                )
            )
            interest_this_year = 0.0

    logger.debug(
        f"Projected {total_periods} periods ({len(rows)} rows): "
        f"final balance {balance:.2f}, interest {cumulative_interest:.2f}, doubling {doubling.status.value}"
    )

    return ProjectionResult(
        final_balance=balance,
        total_interest=cumulative_interest,
        total_deposits=total_deposits,
        yearly_breakdown=tuple(rows),
        time_to_double=doubling.time,
        doubling_status=doubling.status,
    )


__all__ = [
    "project",
]
