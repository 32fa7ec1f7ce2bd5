# backend/habit_tracker/routes/auth_routes.py

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import (
    create_access_token,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
)

from .. import db
from ..models.user import User
from ..schemas import LoginRequest, RegisterRequest, parse_body
from ..services.users import authenticate, register_user

auth_bp = Blueprint("auth", __name__)


def _session_response(user, status):
    access_token = create_access_token(identity=str(user.id))
    resp = jsonify({"token": access_token, "user": user.to_dict()})
    set_access_cookies(resp, access_token)
    return resp, status


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    req = parse_body(RegisterRequest, request.get_json(silent=True) or {})
    user = register_user(req)
    return _session_response(user, 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or {}

    # Debug payload keys (do not log password)
    current_app.logger.info(f"[auth/login] keys={list(data.keys())}")

    req = parse_body(LoginRequest, data)
    user = authenticate(req)
    return _session_response(user, 200)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    resp = jsonify({"message": "Logged out"})
    unset_jwt_cookies(resp)
    return resp, 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    user_id = int(get_jwt_identity())
    user = db.session.get(User, user_id)
    if not user:
        return jsonify({"message": "user not found"}), 404
    return jsonify({"user": user.to_dict()}), 200
