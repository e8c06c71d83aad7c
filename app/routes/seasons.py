# app/routes/seasons.py
from __future__ import annotations

from datetime import date

from flask import Blueprint, abort, jsonify, request

from pricing_tracker.seasons import (
    cost_label,
    current_shipping_season,
    format_date_range,
    generate_season_options,
    season_info,
    season_status,
    status_label,
)

seasons_bp = Blueprint("seasons", __name__, url_prefix="/api/seasons")


def _reference_date() -> date:
    """`?date=YYYY-MM-DD`, defaulting to today."""
    raw = request.args.get("date")
    if not raw:
        return date.today()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        abort(400, description=f"Invalid date '{raw}', expected YYYY-MM-DD")


def _info_payload(code: str, today: date):
    info = season_info(code, today)
    if info is None:
        return None
    payload = info.to_dict()
    payload["statusLabel"] = status_label(info.status)
    payload["costLabel"] = cost_label(info.status)
    payload["shipWindow"] = format_date_range(info.ship_start, info.ship_end)
    return payload


@seasons_bp.get("/current")
def current_season():
    today = _reference_date()
    return jsonify(_info_payload(current_shipping_season(today), today))


@seasons_bp.get("/options")
def season_options():
    today = _reference_date()
    options = [
        {**option, "status": season_status(option["value"], today).value}
        for option in generate_season_options(today)
    ]
    resp = jsonify(options)
    resp.headers["Cache-Control"] = "no-store"
    return resp


@seasons_bp.get("/<code>")
def season_detail(code: str):
    today = _reference_date()
    payload = _info_payload(code, today)
    if payload is None:
        return jsonify({"ok": False, "error": f"Invalid season code '{code}'"}), 404
    return jsonify(payload)


@seasons_bp.errorhandler(400)
def bad_request(err):
    return jsonify({"ok": False, "error": err.description}), 400
