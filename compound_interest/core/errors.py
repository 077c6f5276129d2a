"""Errors raised by the calculation core."""

from __future__ import annotations

from typing import Optional


class CompoundInterestError(ValueError):
    """Base class for calculation errors surfaced to the caller."""

    code = "calculation_error"

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": str(self)}


class DegenerateMathError(CompoundInterestError):
    """Division by zero, a non-finite logarithm, or an equation with no real root."""

    code = "degenerate_math"


class SimulationCapReachedError(CompoundInterestError):
    """The doubling-time simulation hit its period cap before the balance doubled."""

    code = "simulation_cap_reached"

    def __init__(self, periods_simulated: int, balance: float, target: Optional[float] = None):
        message = f"balance did not double within {periods_simulated} periods (reached {balance:.2f})"
        super().__init__(message)
        self.periods_simulated = periods_simulated
        self.balance = balance
        self.target = target

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["periods_simulated"] = self.periods_simulated
        payload["balance"] = self.balance
        return payload
