"""
JSON API
========
Exposes the calculators over HTTP under ``/api/v1``:

    POST /api/v1/disruption  {trade_volume, tariff_rate, alternative_markets, market_diversification}
    POST /api/v1/offsets     {tariff_rate, trade_volume, country_of_origin, target_country}
    POST /api/v1/scenarios   {base_volume, disruption_probability, time_horizon}
    GET  /api/v1/agreements
"""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from analyzer import (
    calculate_disruption_impact,
    calculate_tariff_offset_strategies,
    predict_trade_scenarios,
)
from config import FREE_TRADE_AGREEMENTS

logger = logging.getLogger(__name__)

# Create Blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api/v1')


def get_limiter(app):
    """Factory to create a limiter attached to the app."""
    return Limiter(
        get_remote_address,
        app=app,
        default_limits=["2000 per day", "500 per hour"],
        storage_uri="memory://"
    )


def _bad_request(exc: Exception):
    logger.info("Rejected API request: %s", exc)
    return jsonify({"error": "Invalid input", "message": str(exc)}), 400


def _payload() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object.")
    return body


@api_bp.route('/disruption', methods=['POST'])
def disruption():
    """Run the disruption impact calculator."""
    try:
        body = _payload()
        markets = body.get("alternative_markets", [])
        if not isinstance(markets, list):
            raise TypeError("alternative_markets must be a list of names.")
        analysis = calculate_disruption_impact(
            float(body["trade_volume"]),
            float(body["tariff_rate"]),
            [str(m) for m in markets],
            float(body["market_diversification"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        return _bad_request(exc)
    return jsonify(analysis.to_dict()), 200


@api_bp.route('/offsets', methods=['POST'])
def offsets():
    """Run the tariff offset calculator."""
    try:
        body = _payload()
        result = calculate_tariff_offset_strategies(
            float(body["tariff_rate"]),
            float(body["trade_volume"]),
            str(body["country_of_origin"]),
            str(body["target_country"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        return _bad_request(exc)
    return jsonify(result.to_dict()), 200


@api_bp.route('/scenarios', methods=['POST'])
def scenarios():
    """Project trade volume under the three scenarios."""
    try:
        body = _payload()
        projection = predict_trade_scenarios(
            float(body["base_volume"]),
            float(body["disruption_probability"]),
            float(body["time_horizon"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        return _bad_request(exc)
    return jsonify(projection.to_dict()), 200


@api_bp.route('/agreements', methods=['GET'])
def agreements():
    """List the free trade agreements used for the FTA check."""
    return jsonify([
        {"name": name, "members": sorted(members)}
        for name, members in FREE_TRADE_AGREEMENTS
    ]), 200
