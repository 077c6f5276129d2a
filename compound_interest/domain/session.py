from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from compound_interest.core.constants import SOLVED_RATE_DECIMALS
from compound_interest.core.projection import project
from compound_interest.core.solver import apply_initial_from_target, apply_rate_from_final_target
from compound_interest.schemas.form import ProjectionForm, parse_amount
from compound_interest.schemas.projection import ProjectionResult


@dataclass
class CalculatorSession:
    """
    Presentation state for one calculator screen.

    Holds the form as typed, the last result, and which chart point is
    selected. Every recalculation is an explicit call; the calculation
    itself stays in the stateless core.
    """

    form: ProjectionForm = field(default_factory=ProjectionForm)
    result: Optional[ProjectionResult] = None
    selected_point: Optional[int] = None

    def calculate(self) -> ProjectionResult:
        self.result = project(self.form.to_input())
        if self.selected_point is not None and self.selected_point >= len(self.chart_points()):
            self.selected_point = None
        return self.result

    def update_form(self, **changes) -> ProjectionResult:
        self.form = self.form.model_copy(update=changes)
        return self.calculate()

    def chart_points(self) -> List[Tuple[int, float]]:
        """(year, balance) pairs, starting with the principal at year 0."""
        if self.result is None:
            self.calculate()
        points = [(0, parse_amount(self.form.initial_investment))]
        points.extend((row.year, row.balance) for row in self.result.yearly_breakdown)
        return points

    def select_point(self, index: int) -> Tuple[int, float]:
        points = self.chart_points()
        if not 0 <= index < len(points):
            raise IndexError(f"chart point {index} out of range (0..{len(points) - 1})")
        self.selected_point = index
        return points[index]

    def clear_selection(self) -> None:
        self.selected_point = None

    def set_initial_from_chart(self, target_balance: float) -> ProjectionResult:
        request = apply_initial_from_target(self.form.to_input(), target_balance)
        return self.update_form(initial_investment=str(int(request.principal)))

    def set_rate_from_final_balance(self, target_balance: float) -> ProjectionResult:
        """Solve for the rate that ends at ``target_balance`` and recalculate.

        A zero principal raises DegenerateMathError and leaves the form untouched.
        """
        request = apply_rate_from_final_target(self.form.to_input(), target_balance)
        return self.update_form(interest_rate=f"{request.annual_rate_percent:.{SOLVED_RATE_DECIMALS}f}")
