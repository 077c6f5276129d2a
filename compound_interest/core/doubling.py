"""Time for a balance to reach twice its principal."""

from __future__ import annotations

import math

from loguru import logger

from compound_interest.core.accumulation import iter_periods
from compound_interest.core.constants import (
    DEFAULT_DOUBLING_CAP_YEARS,
    DOUBLING_TARGET_MULTIPLE,
    MONTHS_PER_YEAR,
)
from compound_interest.core.errors import DegenerateMathError, SimulationCapReachedError
from compound_interest.schemas.projection import (
    DoublingEstimate,
    DoublingStatus,
    DoublingTime,
    ProjectionInput,
)


def time_to_double(
    principal: float,
    annual_rate_percent: float,
    periods_per_year: int,
    periodic_deposit: float = 0.0,
    annual_deposit_increase_percent: float = 0.0,
    cap_years: int = DEFAULT_DOUBLING_CAP_YEARS,
) -> DoublingTime:
    """
    Without deposits the closed form ln(2) / (n * ln(1 + r/n)) is used.
    With deposits the balance is simulated period by period, using the same
    accrual rules as the projection, for at most ``cap_years`` years.

    Raises DegenerateMathError when the closed form has no finite positive
    answer and SimulationCapReachedError when the simulation never doubles.
    """
    n = int(periods_per_year)
    rate_per_period = (annual_rate_percent / 100) / n

    if periodic_deposit <= 0:
        return _closed_form(annual_rate_percent, rate_per_period, n)

    return _simulate(
        principal=principal,
        rate_per_period=rate_per_period,
        periods_per_year=n,
        periodic_deposit=periodic_deposit,
        annual_deposit_increase_percent=annual_deposit_increase_percent,
        cap_years=cap_years,
    )


def _closed_form(annual_rate_percent: float, rate_per_period: float, periods_per_year: int) -> DoublingTime:
    if annual_rate_percent <= 0:
        raise DegenerateMathError(
            f"doubling time is undefined for a non-positive rate ({annual_rate_percent}%)"
        )

    growth = 1 + rate_per_period
    if growth <= 0:
        raise DegenerateMathError(f"per-period growth factor {growth} has no logarithm")

    denom = periods_per_year * math.log1p(rate_per_period)
    if not math.isfinite(denom) or denom <= 0:
        raise DegenerateMathError(f"rate {annual_rate_percent}% is too small to ever double")

    t = math.log(2) / denom
    if not math.isfinite(t) or t <= 0:
        raise DegenerateMathError(f"doubling time is not finite (t={t})")

    years = math.floor(t)
    months = min(math.floor((t - years) * MONTHS_PER_YEAR), MONTHS_PER_YEAR - 1)
    return DoublingTime(years=years, months=months)


def _simulate(
    principal: float,
    rate_per_period: float,
    periods_per_year: int,
    periodic_deposit: float,
    annual_deposit_increase_percent: float,
    cap_years: int,
) -> DoublingTime:
    target = principal * DOUBLING_TARGET_MULTIPLE
    cap = cap_years * periods_per_year

    periods = 0
    balance = float(principal)
    if balance < target:
        for step in iter_periods(
            principal,
            rate_per_period,
            periods_per_year,
            cap,
            periodic_deposit,
            annual_deposit_increase_percent,
        ):
            periods = step.period
            balance = step.balance
            if balance >= target:
                break
        else:
            logger.warning(
                f"Doubling simulation stopped at the {cap}-period cap with balance {balance:.2f} < {target:.2f}"
            )
            raise SimulationCapReachedError(periods, balance, target)

    years = periods // periods_per_year
    months = math.floor((periods % periods_per_year) / periods_per_year * MONTHS_PER_YEAR)
    return DoublingTime(years=years, months=months)


def estimate_time_to_double(
    request: ProjectionInput,
    cap_years: int = DEFAULT_DOUBLING_CAP_YEARS,
) -> DoublingEstimate:
    """Like time_to_double, but reports a non-doubling input as a status instead of raising."""
    try:
        doubling = time_to_double(
            principal=request.principal,
            annual_rate_percent=request.annual_rate_percent,
            periods_per_year=request.periods_per_year,
            periodic_deposit=request.periodic_deposit,
            annual_deposit_increase_percent=request.annual_deposit_increase_percent,
            cap_years=cap_years,
        )
    except SimulationCapReachedError as exc:
        return DoublingEstimate(status=DoublingStatus.CAP_REACHED, detail=str(exc))
    except DegenerateMathError as exc:
        return DoublingEstimate(status=DoublingStatus.UNDEFINED, detail=str(exc))

    return DoublingEstimate(status=DoublingStatus.CONVERGED, time=doubling)
