"""HTTP routes for the Flask API."""

import json
import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from wealthcalc import __version__
from wealthcalc.core.goal import solve_required_contribution
from wealthcalc.core.lumpsum import simulate_lumpsum
from wealthcalc.core.scenarios import SCENARIO_PRESETS, compare_scenarios
from wealthcalc.core.sip import simulate_sip
from wealthcalc.core.swp import simulate_swp, sustainable_withdrawal
from wealthcalc.schemas.ping import PingResponse
from wealthcalc.schemas.projection import (
    GoalRequest,
    LumpsumRequest,
    SIPRequest,
    SustainableWithdrawalRequest,
    SustainableWithdrawalResponse,
    SWPRequest,
)
from wealthcalc.schemas.scenarios import (
    ScenarioComparisonRequest,
    ScenarioComparisonResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    # exc.json() stringifies error contexts such as a raised ValueError
    return jsonify({"detail": json.loads(exc.json())}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("request body must be a JSON object")
    return raw_payload


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/scenarios")
def scenarios() -> Any:
    """Preset return scenarios used by the comparison view."""
    return jsonify([preset.model_dump(mode="json") for preset in SCENARIO_PRESETS])


@api_bp.post("/calc/sip")
def sip() -> Any:
    payload = SIPRequest.model_validate(_payload())
    logger.debug("sip request %s", payload)
    result = simulate_sip(
        periodic_contribution=payload.periodic_contribution,
        years=payload.years,
        annual_return_pct=payload.annual_return_pct,
        adjust_for_inflation=payload.adjust_for_inflation,
        annual_inflation_pct=payload.annual_inflation_pct,
        step_up=payload.step_up,
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/lumpsum")
def lumpsum() -> Any:
    payload = LumpsumRequest.model_validate(_payload())
    logger.debug("lumpsum request %s", payload)
    result = simulate_lumpsum(
        principal=payload.principal,
        years=payload.years,
        annual_return_pct=payload.annual_return_pct,
        adjust_for_inflation=payload.adjust_for_inflation,
        annual_inflation_pct=payload.annual_inflation_pct,
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/swp")
def swp() -> Any:
    payload = SWPRequest.model_validate(_payload())
    logger.debug("swp request %s", payload)
    result = simulate_swp(
        principal=payload.principal,
        periodic_withdrawal=payload.withdrawal_amount,
        years=payload.years,
        annual_return_pct=payload.annual_return_pct,
        adjust_for_inflation=payload.adjust_for_inflation,
        annual_inflation_pct=payload.annual_inflation_pct,
        withdrawal_growth_pct=payload.withdrawal_growth_pct,
        frequency=payload.frequency,
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/swp/sustainable")
def swp_sustainable() -> Any:
    """Level monthly withdrawal that lasts exactly the requested horizon."""
    payload = SustainableWithdrawalRequest.model_validate(_payload())
    amount = sustainable_withdrawal(
        principal=payload.principal,
        years=payload.years,
        annual_return_pct=payload.annual_return_pct,
        adjust_for_inflation=payload.adjust_for_inflation,
        annual_inflation_pct=payload.annual_inflation_pct,
    )
    return jsonify(SustainableWithdrawalResponse(monthly_withdrawal=amount).model_dump())


@api_bp.post("/calc/goal")
def goal() -> Any:
    payload = GoalRequest.model_validate(_payload())
    logger.debug("goal request %s", payload)
    result = solve_required_contribution(
        target_amount=payload.target_amount,
        years=payload.years,
        annual_return_pct=payload.annual_return_pct,
        adjust_for_inflation=payload.adjust_for_inflation,
        annual_inflation_pct=payload.annual_inflation_pct,
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/scenarios")
def scenario_comparison() -> Any:
    payload = ScenarioComparisonRequest.model_validate(_payload())
    outcomes = compare_scenarios(
        mode=payload.mode,
        amount=payload.amount,
        years=payload.years,
        adjust_for_inflation=payload.adjust_for_inflation,
        annual_inflation_pct=payload.annual_inflation_pct,
        principal=payload.principal,
        step_up=payload.step_up,
        withdrawal_growth_pct=payload.withdrawal_growth_pct,
        frequency=payload.frequency,
    )
    response = ScenarioComparisonResponse(outcomes=outcomes)
    return jsonify(response.model_dump(mode="json"))
