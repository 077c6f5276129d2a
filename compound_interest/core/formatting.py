"""Display helpers for callers that render projection results."""

from __future__ import annotations

import math

from compound_interest.schemas.form import Currency
from compound_interest.schemas.projection import DoublingTime


def currency_string(value: float, currency: Currency = Currency.USD) -> str:
    """Format ``value`` as whole currency units, e.g. ``$6,417``.

    The value is first rounded to one decimal (halves away from zero), then
    to whole units with halves to even, so 2.5 shows as ``$2`` and 3.5 as ``$4``.
    """
    rounded = math.copysign(math.floor(abs(value) * 10 + 0.5), value) / 10
    whole = round(abs(rounded))
    sign = "-" if rounded < 0 and whole else ""
    return f"{sign}{currency.value}{whole:,}"


def percent_string(value: float) -> str:
    return f"{value:.2f}%"


def duration_string(duration: DoublingTime) -> str:
    return f"{duration.years} years, {duration.months} months"
