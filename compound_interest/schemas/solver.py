"""Data contracts for the inverse-solve and doubling-time endpoints."""

from pydantic import BaseModel, Field

from compound_interest.core.constants import DEFAULT_DOUBLING_CAP_YEARS
from compound_interest.schemas.projection import CompoundFrequency


class InitialFromTargetRequest(BaseModel):
    target_balance: float = Field(..., description="Balance picked as the new starting value.")


class InitialFromTargetResponse(BaseModel):
    principal: int


class RateFromTargetRequest(BaseModel):
    """Inputs for solving the annual rate that reaches a final balance."""

    target_balance: float = Field(..., description="Desired balance at the end of the duration.")
    principal: float = Field(..., ge=0)
    periods_per_year: CompoundFrequency = CompoundFrequency.MONTHLY
    duration_years: float = Field(..., ge=0)


class RateFromTargetResponse(BaseModel):
    annual_rate_percent: float


class DoublingTimeRequest(BaseModel):
    principal: float = Field(..., ge=0)
    annual_rate_percent: float
    periods_per_year: CompoundFrequency = CompoundFrequency.MONTHLY
    periodic_deposit: float = Field(0.0, ge=0)
    annual_deposit_increase_percent: float = Field(0.0, ge=0)
    cap_years: int = Field(
        DEFAULT_DOUBLING_CAP_YEARS,
        gt=0,
        le=1000,
        description="Years to simulate before giving up when deposits are set.",
    )


class FrequencyOption(BaseModel):
    value: int
    label: str
