"""Inverse solves: the principal or the rate that produces a chosen balance."""

from __future__ import annotations

import math

from loguru import logger

from compound_interest.core.constants import (
    MAX_SOLVED_RATE_PERCENT,
    MIN_SOLVED_RATE_PERCENT,
    SOLVED_RATE_DECIMALS,
)
from compound_interest.core.errors import DegenerateMathError
from compound_interest.schemas.projection import ProjectionInput


def solve_initial_from_target(target_balance: float) -> int:
    """Use the target as the new principal, rounded half away from zero.

    This is an override of the starting value, not an inverse of the growth model.
    """
    if not math.isfinite(target_balance):
        raise DegenerateMathError(f"target balance must be finite, got {target_balance}")
    return int(math.copysign(math.floor(abs(target_balance) + 0.5), target_balance))


def solve_rate_from_final_target(
    target_balance: float,
    principal: float,
    periods_per_year: int,
    duration_years: float,
    min_rate: float = MIN_SOLVED_RATE_PERCENT,
    max_rate: float = MAX_SOLVED_RATE_PERCENT,
) -> float:
    """
    Invert A = P(1 + r/n)^(nt) for the annual rate, as a percentage.

    Periodic deposits are not part of this formula, so with deposits the
    rate is only an approximation. The result is clamped to
    [min_rate, max_rate].
    """
    if principal == 0:
        raise DegenerateMathError("cannot solve for a rate with a zero principal")

    n = int(periods_per_year)
    exponent = n * duration_years
    if exponent <= 0:
        raise DegenerateMathError("cannot solve for a rate over a zero duration")

    ratio = target_balance / principal
    if ratio < 0:
        raise DegenerateMathError(f"no real rate turns {principal} into {target_balance}")

    try:
        rate_per_period = ratio ** (1.0 / exponent) - 1
    except OverflowError as exc:
        raise DegenerateMathError(f"rate overflowed for ratio {ratio}") from exc

    annual_rate = rate_per_period * n * 100
    if not math.isfinite(annual_rate):
        raise DegenerateMathError(f"solved rate is not finite ({annual_rate})")

    clamped = max(min_rate, min(max_rate, annual_rate))
    if clamped != annual_rate:
        logger.warning(f"Solved rate {annual_rate:.4f}% clamped to {clamped}%")
    return clamped


def apply_initial_from_target(request: ProjectionInput, target_balance: float) -> ProjectionInput:
    """Return a copy of ``request`` starting from the chosen balance."""
    principal = solve_initial_from_target(target_balance)
    return request.model_copy(update={"principal": float(max(principal, 0))})


def apply_rate_from_final_target(
    request: ProjectionInput,
    target_balance: float,
    min_rate: float = MIN_SOLVED_RATE_PERCENT,
    max_rate: float = MAX_SOLVED_RATE_PERCENT,
) -> ProjectionInput:
    """Return a copy of ``request`` with the rate that reaches ``target_balance``.

    The rate is stored with two decimals, the precision the rate field is edited at.
    """
    rate = solve_rate_from_final_target(
        target_balance=target_balance,
        principal=request.principal,
        periods_per_year=request.periods_per_year,
        duration_years=request.duration_years,
        min_rate=min_rate,
        max_rate=max_rate,
    )
    return request.model_copy(update={"annual_rate_percent": round(rate, SOLVED_RATE_DECIMALS)})
