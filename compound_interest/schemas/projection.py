"""Value objects exchanged with the projection engine."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from compound_interest.core.constants import MONTHS_PER_YEAR


class CompoundFrequency(IntEnum):
    """Supported compounding frequencies, valued by periods per year."""

    YEARLY = 1
    QUARTERLY = 4
    MONTHLY = 12
    DAILY = 365

    @property
    def label(self) -> str:
        return _FREQUENCY_LABELS[self]


_FREQUENCY_LABELS = {
    CompoundFrequency.YEARLY: "Yearly (1/yr)",
    CompoundFrequency.QUARTERLY: "Quarterly (4/yr)",
    CompoundFrequency.MONTHLY: "Monthly (12/yr)",
    CompoundFrequency.DAILY: "Daily (365/yr)",
}


class DoublingStatus(str, Enum):
    CONVERGED = "converged"
    UNDEFINED = "undefined"
    CAP_REACHED = "cap_reached"


class ProjectionInput(BaseModel):
    """Inputs for a single projection, already parsed into numbers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(..., ge=0, description="Initial balance before any growth.")
    annual_rate_percent: float = Field(
        ...,
        description="Nominal annual rate as a percentage (e.g. 5 for 5%). Negative means decay.",
    )
    periods_per_year: CompoundFrequency = Field(
        CompoundFrequency.MONTHLY,
        description="Compounding periods per year: 1, 4, 12 or 365.",
    )
    duration_years: float = Field(..., ge=0, description="Duration in fractional years.")
    periodic_deposit: float = Field(
        0.0,
        ge=0,
        description="Contribution added at the end of every compounding period.",
    )
    annual_deposit_increase_percent: float = Field(
        0.0,
        ge=0,
        description="Percentage the periodic deposit grows after each full year.",
    )

    @classmethod
    def from_duration(cls, years: int, months: int = 0, **fields) -> "ProjectionInput":
        """Build an input from a whole-year plus whole-month duration."""
        return cls(duration_years=years + months / MONTHS_PER_YEAR, **fields)

    @property
    def rate_per_period(self) -> float:
        return (self.annual_rate_percent / 100) / int(self.periods_per_year)

    @property
    def total_periods(self) -> int:
        return math.floor(int(self.periods_per_year) * self.duration_years)


class YearlyRecord(BaseModel):
    """One row of the yearly breakdown; the last row may close a partial year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    interest_this_year: float
    cumulative_interest: float
    balance: float


class DoublingTime(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    years: int = Field(..., ge=0)
    months: int = Field(..., ge=0, lt=MONTHS_PER_YEAR)


class DoublingEstimate(BaseModel):
    """Doubling time plus whether it could be computed at all."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: DoublingStatus
    time: Optional[DoublingTime] = None
    detail: Optional[str] = None


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_balance: float
    total_interest: float
    total_deposits: float
    yearly_breakdown: Tuple[YearlyRecord, ...] = ()
    time_to_double: Optional[DoublingTime] = None
    doubling_status: DoublingStatus = DoublingStatus.CONVERGED


__all__ = [
    "CompoundFrequency",
    "DoublingStatus",
    "ProjectionInput",
    "YearlyRecord",
    "DoublingTime",
    "DoublingEstimate",
    "ProjectionResult",
]
