from __future__ import annotations

from math import isclose

import pytest

from compound_interest.core.errors import DegenerateMathError
from compound_interest.domain.session import CalculatorSession
from compound_interest.schemas.form import ProjectionForm


def test_calculate_stores_result_and_chart_points():
    session = CalculatorSession()
    result = session.calculate()

    assert session.result is result
    points = session.chart_points()
    assert len(points) == len(result.yearly_breakdown) + 1
    assert points[0] == (0, 5000.0)
    assert points[-1] == (5, result.final_balance)


def test_selection_is_independent_of_calculation():
    session = CalculatorSession()
    session.calculate()

    assert session.select_point(2) == session.chart_points()[2]
    assert session.selected_point == 2

    session.clear_selection()
    assert session.selected_point is None

    with pytest.raises(IndexError):
        session.select_point(6)


def test_selection_dropped_when_breakdown_shrinks():
    session = CalculatorSession()
    session.calculate()
    session.select_point(5)

    session.update_form(years=2)
    assert session.selected_point is None


def test_set_initial_from_chart_overrides_principal():
    session = CalculatorSession()
    session.calculate()

    result = session.set_initial_from_chart(7000.4)

    assert session.form.initial_investment == "7000"
    assert isclose(result.final_balance, 7000 * (1 + 0.05 / 12) ** 60, rel_tol=1e-9)


def test_set_rate_from_final_balance_hits_target():
    session = CalculatorSession()
    session.calculate()

    result = session.set_rate_from_final_balance(10000.0)

    expected_rate = (2 ** (1 / 60) - 1) * 12 * 100
    assert session.form.interest_rate == f"{expected_rate:.2f}"
    # two-decimal rate lands within a few currency units of the target
    assert abs(result.final_balance - 10000.0) < 5.0


def test_set_rate_with_zero_principal_leaves_form_unchanged():
    session = CalculatorSession(form=ProjectionForm(initial_investment=""))
    session.calculate()

    with pytest.raises(DegenerateMathError):
        session.set_rate_from_final_balance(10000.0)
    assert session.form.interest_rate == "5"


def test_set_initial_from_chart_never_goes_negative():
    session = CalculatorSession()
    session.calculate()

    result = session.set_initial_from_chart(-49.6)

    assert session.form.initial_investment == "0"
    assert result.final_balance == 0.0
