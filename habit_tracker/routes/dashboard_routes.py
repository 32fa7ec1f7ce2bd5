# backend/habit_tracker/routes/dashboard_routes.py
from datetime import date

from flask import Blueprint, Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from ..dashboard import build_dashboard, export_csv, export_filename
from ..errors import ValidationError
from ..schemas import parse_iso_day
from ..services.habits import list_habits
from ..stats import PERIODS

dashboard_bp = Blueprint("dashboard", __name__)


def _reference_date():
    raw = (request.args.get("date") or "").strip()
    if not raw:
        return date.today()
    try:
        return parse_iso_day(raw)
    except ValueError as e:
        raise ValidationError(str(e))


# -------------------------
# DASHBOARD OVERVIEW
# -------------------------
@dashboard_bp.route("", methods=["GET"])
@jwt_required()
def dashboard_overview():
    user_id = int(get_jwt_identity())

    period = (request.args.get("period") or "monthly").strip().lower()
    if period not in PERIODS:
        raise ValidationError(f"period must be one of: {', '.join(PERIODS)}")
    ref = _reference_date()

    view = build_dashboard(
        list_habits(user_id),
        ref,
        period,
        streak_limit=current_app.config.get("STREAK_LOOKBACK_DAYS", 365),
    )
    return jsonify(view), 200


# -------------------------
# CSV EXPORT
# -------------------------
@dashboard_bp.route("/export", methods=["GET"])
@jwt_required()
def dashboard_export():
    user_id = int(get_jwt_identity())
    ref = _reference_date()

    body = export_csv(list_habits(user_id), ref)
    return Response(
        body,
        mimetype="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename(ref)}"
        },
    )
