"""Text form inputs, parsed into a ProjectionInput at the boundary."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from compound_interest.schemas.projection import CompoundFrequency, ProjectionInput


class Currency(str, Enum):
    """Display symbols only; amounts are never converted."""

    USD = "$"
    EUR = "€"
    GBP = "£"
    INR = "₹"
    JPY = "¥"
    AED = "د.إ"
    THB = "฿"


def parse_amount(text: str) -> float:
    """Parse numeric text, coercing empty, invalid or negative input to 0."""
    try:
        value = float(text.strip().replace(",", ""))
    except (AttributeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


class ProjectionForm(BaseModel):
    """The calculator form as typed by the user."""

    model_config = ConfigDict(extra="forbid")

    currency: Currency = Currency.USD
    initial_investment: str = "5000"
    interest_rate: str = "5"
    compound_frequency: CompoundFrequency = CompoundFrequency.MONTHLY
    years: int = Field(5, ge=0, le=100)
    months: int = Field(0, ge=0, le=11)
    monthly_deposit: str = ""
    annual_deposit_increase: str = ""

    def to_input(self) -> ProjectionInput:
        return ProjectionInput.from_duration(
            years=self.years,
            months=self.months,
            principal=parse_amount(self.initial_investment),
            annual_rate_percent=parse_amount(self.interest_rate),
            periods_per_year=self.compound_frequency,
            periodic_deposit=parse_amount(self.monthly_deposit),
            annual_deposit_increase_percent=parse_amount(self.annual_deposit_increase),
        )
