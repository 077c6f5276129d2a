from __future__ import annotations

from math import isclose

import pytest

from compound_interest.core.formatting import currency_string, duration_string, percent_string
from compound_interest.schemas.form import Currency, ProjectionForm, parse_amount
from compound_interest.schemas.projection import CompoundFrequency, DoublingTime


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5000", 5000.0),
        (" 42 ", 42.0),
        ("1,000.50", 1000.5),
        ("", 0.0),
        ("abc", 0.0),
        ("-5", 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
    ],
)
def test_parse_amount_coerces_bad_text_to_zero(text, expected):
    assert parse_amount(text) == expected


def test_default_form_matches_calculator_defaults():
    request = ProjectionForm().to_input()

    assert request.principal == 5000.0
    assert request.annual_rate_percent == 5.0
    assert request.periods_per_year == CompoundFrequency.MONTHLY
    assert request.duration_years == 5.0
    assert request.periodic_deposit == 0.0
    assert request.annual_deposit_increase_percent == 0.0


def test_form_combines_years_and_months():
    form = ProjectionForm(
        initial_investment="1200",
        interest_rate="oops",
        compound_frequency=4,
        years=1,
        months=6,
        monthly_deposit="25",
        annual_deposit_increase="2.5",
    )
    request = form.to_input()

    assert isclose(request.duration_years, 1.5)
    assert request.total_periods == 6
    assert request.annual_rate_percent == 0.0
    assert request.periodic_deposit == 25.0
    assert request.annual_deposit_increase_percent == 2.5


@pytest.mark.parametrize("field, value", [("years", 101), ("months", 12), ("months", -1)])
def test_form_rejects_out_of_range_steppers(field, value):
    with pytest.raises(ValueError):
        ProjectionForm(**{field: value})


def test_currency_string_rounds_to_whole_units():
    assert currency_string(6416.79) == "$6,417"
    assert currency_string(1234567.0, Currency.EUR) == "€1,234,567"
    assert currency_string(0.4, Currency.GBP) == "£0"
    assert currency_string(-12.3) == "-$12"


def test_currency_string_rounds_whole_unit_halves_to_even():
    assert currency_string(2.5) == "$2"
    assert currency_string(3.5) == "$4"
    assert currency_string(2.45) == "$2"
    assert currency_string(-2.5) == "-$2"


def test_percent_and_duration_strings():
    assert percent_string(5) == "5.00%"
    assert percent_string(13.943) == "13.94%"
    assert duration_string(DoublingTime(years=13, months=10)) == "13 years, 10 months"
