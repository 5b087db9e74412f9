"""HTTP handlers for inventory, market quotes, pricing and futures contracts.

The record store and quote provider are read from ``current_app.extensions``
so each app instance owns its own state.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from ..core.errors import UpstreamError, ValidationError
from ..core.types import RecordKind
from ..core.utils import invalid_fields
from ..market.base import QuoteProvider
from ..pricing.purchase import PRICING_ERROR, PRICING_FIELDS, purchase_price_from_payload
from ..state.store import RecordStore

logger = logging.getLogger(__name__)

bridge_bp = Blueprint("bridge", __name__)

INVENTORY_FIELDS = ("type", "quantity", "condition")
INVENTORY_ERROR = "Please provide type, numeric quantity, and condition."

FUTURES_FIELDS = ("commodity", "quantity", "expirationDate", "targetPrice", "contractType")
FUTURES_ERROR = (
    "Please provide commodity, numeric quantity, expirationDate, numeric targetPrice, "
    'and contractType (e.g., "long" or "short").'
)


def _store() -> RecordStore:
    return current_app.extensions["record_store"]


def _provider() -> QuoteProvider:
    return current_app.extensions["quote_provider"]


def _json_body(message: str, fields) -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(message, fields)
    return data


@bridge_bp.errorhandler(ValidationError)
def handle_validation_error(e: ValidationError):
    return jsonify({"error": e.message, "fields": list(e.fields)}), 400


@bridge_bp.errorhandler(UpstreamError)
def handle_upstream_error(e: UpstreamError):
    logger.error(
        "Error fetching market data (upstream status %s): %s",
        e.status_code,
        e,
        exc_info=True,
    )
    return jsonify({"error": "Error fetching market data"}), 500


@bridge_bp.route("/inventory", methods=["POST"])
def create_inventory():
    data = _json_body(INVENTORY_ERROR, INVENTORY_FIELDS)
    if invalid_fields(data, text_fields=("type", "condition"), number_fields=("quantity",)):
        raise ValidationError(INVENTORY_ERROR, INVENTORY_FIELDS)
    record = _store().add_inventory(
        type=data["type"], quantity=data["quantity"], condition=data["condition"]
    )
    return jsonify(record.to_dict()), 201


@bridge_bp.route("/inventory", methods=["GET"])
def list_inventory():
    return jsonify([r.to_dict() for r in _store().list_all(RecordKind.INVENTORY)])


@bridge_bp.route("/market/<symbol>", methods=["GET"])
def market_quote(symbol: str):
    return jsonify(_provider().get_quote(symbol))


@bridge_bp.route("/pricing/calculate", methods=["POST"])
def calculate_pricing():
    data = _json_body(PRICING_ERROR, PRICING_FIELDS)
    return jsonify({"purchasePrice": purchase_price_from_payload(data)})


@bridge_bp.route("/futures", methods=["POST"])
def create_futures():
    data = _json_body(FUTURES_ERROR, FUTURES_FIELDS)
    bad = invalid_fields(
        data,
        text_fields=("commodity", "expirationDate", "contractType"),
        number_fields=("quantity", "targetPrice"),
    )
    if bad:
        raise ValidationError(FUTURES_ERROR, FUTURES_FIELDS)
    contract = _store().add_contract(
        commodity=data["commodity"],
        quantity=data["quantity"],
        expiration_date=data["expirationDate"],
        target_price=data["targetPrice"],
        contract_type=data["contractType"],
    )
    return jsonify(contract.to_dict()), 201


@bridge_bp.route("/futures", methods=["GET"])
def list_futures():
    return jsonify([c.to_dict() for c in _store().list_all(RecordKind.FUTURES)])
