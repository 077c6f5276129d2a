"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from compound_interest.core.doubling import time_to_double
from compound_interest.core.errors import CompoundInterestError
from compound_interest.core.formatting import currency_string, duration_string, percent_string
from compound_interest.core.projection import project
from compound_interest.core.solver import solve_initial_from_target, solve_rate_from_final_target
from compound_interest.schemas.form import Currency, ProjectionForm
from compound_interest.schemas.projection import CompoundFrequency, ProjectionInput, ProjectionResult
from compound_interest.schemas.solver import (
    DoublingTimeRequest,
    FrequencyOption,
    InitialFromTargetRequest,
    InitialFromTargetResponse,
    RateFromTargetRequest,
    RateFromTargetResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CompoundInterestError)
def _handle_calculation_error(exc: CompoundInterestError):
    """Degenerate math and non-converging simulations are client-visible errors."""
    logger.info(f"Calculation rejected: {exc}")
    return jsonify(exc.to_dict()), HTTPStatus.UNPROCESSABLE_ENTITY


def _json_payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _projection_response(projection_input: ProjectionInput, currency: Optional[Currency] = None) -> Any:
    settings = current_app.config["SETTINGS"]
    result = project(projection_input, doubling_cap_years=settings.doubling_cap_years)
    body = result.model_dump(mode="json")
    if currency is not None:
        body["display"] = _display_block(projection_input, result, currency)
    return jsonify(body)


def _display_block(projection_input: ProjectionInput, result: ProjectionResult, currency: Currency) -> Dict[str, Any]:
    return {
        "currency": currency.value,
        "final_balance": currency_string(result.final_balance, currency),
        "total_interest": currency_string(result.total_interest, currency),
        "annual_rate": percent_string(projection_input.annual_rate_percent),
        "time_to_double": duration_string(result.time_to_double) if result.time_to_double else None,
        "yearly_breakdown": [
            {
                "year": row.year,
                "interest": currency_string(row.interest_this_year, currency),
                "accrued_interest": currency_string(row.cumulative_interest, currency),
                "balance": currency_string(row.balance, currency),
            }
            for row in result.yearly_breakdown
        ],
    }


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.get("/frequencies")
def frequencies() -> Any:
    options = [FrequencyOption(value=int(freq), label=freq.label) for freq in CompoundFrequency]
    return jsonify([option.model_dump() for option in options])


@api_bp.post("/projection")
def projection() -> Any:
    """Project a numeric input; ?currency=<symbol> adds formatted display strings."""
    projection_input = ProjectionInput.model_validate(_json_payload())
    symbol = request.args.get("currency")
    try:
        currency = Currency(symbol) if symbol else None
    except ValueError:
        return jsonify({"detail": f"unknown currency symbol {symbol!r}"}), HTTPStatus.UNPROCESSABLE_ENTITY
    return _projection_response(projection_input, currency)


@api_bp.post("/projection/form")
def projection_form() -> Any:
    """Project the calculator form as typed; bad numeric text counts as 0."""
    form = ProjectionForm.model_validate(_json_payload())
    return _projection_response(form.to_input(), form.currency)


@api_bp.post("/solve/initial")
def solve_initial() -> Any:
    payload = InitialFromTargetRequest.model_validate(_json_payload())
    response = InitialFromTargetResponse(principal=solve_initial_from_target(payload.target_balance))
    return jsonify(response.model_dump())


@api_bp.post("/solve/rate")
def solve_rate() -> Any:
    settings = current_app.config["SETTINGS"]
    payload = RateFromTargetRequest.model_validate(_json_payload())
    rate = solve_rate_from_final_target(
        target_balance=payload.target_balance,
        principal=payload.principal,
        periods_per_year=payload.periods_per_year,
        duration_years=payload.duration_years,
        min_rate=settings.min_solved_rate,
        max_rate=settings.max_solved_rate,
    )
    return jsonify(RateFromTargetResponse(annual_rate_percent=rate).model_dump())


@api_bp.post("/doubling-time")
def doubling_time() -> Any:
    payload = DoublingTimeRequest.model_validate(_json_payload())
    result = time_to_double(
        principal=payload.principal,
        annual_rate_percent=payload.annual_rate_percent,
        periods_per_year=payload.periods_per_year,
        periodic_deposit=payload.periodic_deposit,
        annual_deposit_increase_percent=payload.annual_deposit_increase_percent,
        cap_years=payload.cap_years,
    )
    return jsonify(result.model_dump())
