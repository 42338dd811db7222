"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from calculatrice.core.formatting import display_values
from calculatrice.core.inputs import parse_numeric_input
from calculatrice.core.investment import compute_investment
from calculatrice.core.loan import compute_loan
from calculatrice.core.store import CalculatorStore
from calculatrice.models import FIELD_RANGES
from calculatrice.schemas.calculator import (
    CalculatorCard,
    CalculatorList,
    FieldUpdate,
    InvestmentRequest,
    InvestmentResponse,
    LoanRequest,
    LoanResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _store() -> CalculatorStore:
    return current_app.extensions["calculator_store"]


def _build_card(record) -> CalculatorCard:
    return CalculatorCard(
        record=record, display=display_values(record), ranges=FIELD_RANGES[record.kind]
    )


def _card(record) -> Dict[str, Any]:
    return _build_card(record).model_dump()


def _collection() -> Dict[str, Any]:
    cards = [_build_card(record) for record in _store().records]
    return CalculatorList(calculators=cards).model_dump()


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/calculators")
def list_calculators() -> Any:
    """All cards in display order."""
    return jsonify(_collection())


@api_bp.post("/calculators/loan")
def add_loan() -> Any:
    record = _store().add_loan()
    return jsonify(_card(record)), HTTPStatus.CREATED


@api_bp.post("/calculators/investment")
def add_investment() -> Any:
    record = _store().add_investment()
    return jsonify(_card(record)), HTTPStatus.CREATED


@api_bp.post("/calculators/<int:record_id>/duplicate")
def duplicate_calculator(record_id: int) -> Any:
    """The [+] button: append a copy of this card."""
    record = _store().duplicate(record_id)
    if record is None:
        return jsonify({"detail": f"no calculator with id {record_id}"}), HTTPStatus.NOT_FOUND
    return jsonify(_card(record)), HTTPStatus.CREATED


@api_bp.patch("/calculators/<int:record_id>")
def update_calculator(record_id: int) -> Any:
    """Apply one field edit; unknown ids and mismatched fields are ignored."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = FieldUpdate.model_validate(raw_payload)

    value = parse_numeric_input(payload.value)
    if value is None:
        logger.debug("rejected input %r for %s", payload.value, payload.field)
        return jsonify({"detail": f"not a number: {payload.value!r}"}), HTTPStatus.BAD_REQUEST

    _store().update(record_id, payload.field, value)
    return jsonify(_collection())


@api_bp.delete("/calculators/<int:record_id>")
def remove_calculator(record_id: int) -> Any:
    """The [-] button."""
    _store().remove(record_id)
    return jsonify(_collection())


@api_bp.post("/calc/loan")
def loan() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = LoanRequest.model_validate(raw_payload)
    monthly, total = compute_loan(payload.loanAmount, payload.interestRate, payload.loanTerm)
    response = LoanResponse(
        monthlyPayment=monthly, totalPayment=total, interest=total - payload.loanAmount
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/investment")
def investment() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = InvestmentRequest.model_validate(raw_payload)
    contributions, value, growth = compute_investment(
        payload.currentAge,
        payload.retirementAge,
        payload.currentBalance,
        payload.monthlyContribution,
        payload.annualReturn,
    )
    response = InvestmentResponse(
        totalContributions=contributions, totalValue=value, growth=growth
    )
    return jsonify(response.model_dump())
