# backend/habit_tracker/routes/habit_routes.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from ..schemas import HabitRequest, ToggleRequest, parse_body
from ..services import habits as habit_service

habits_bp = Blueprint("habits", __name__)


def _body():
    return request.get_json(silent=True) or {}


# -------------------------
# LIST / CREATE
# -------------------------
@habits_bp.route("", methods=["GET"])
@jwt_required()
def list_habits():
    user_id = int(get_jwt_identity())
    rows = habit_service.list_habits(user_id)
    return jsonify({"habits": [h.to_dict() for h in rows]}), 200


@habits_bp.route("", methods=["POST"])
@jwt_required()
def create_habit():
    user_id = int(get_jwt_identity())
    req = parse_body(HabitRequest, _body())
    habit = habit_service.create_habit(user_id, req)
    return jsonify({"habit": habit.to_dict()}), 201


# -------------------------
# UPDATE / DELETE (owner only)
# -------------------------
@habits_bp.route("/<int:habit_id>", methods=["PUT"])
@jwt_required()
def update_habit(habit_id):
    user_id = int(get_jwt_identity())
    req = parse_body(HabitRequest, _body())
    habit = habit_service.update_habit(user_id, habit_id, req)
    return jsonify({"habit": habit.to_dict()}), 200


@habits_bp.route("/<int:habit_id>", methods=["DELETE"])
@jwt_required()
def delete_habit(habit_id):
    user_id = int(get_jwt_identity())
    habit_service.delete_habit(user_id, habit_id)
    return jsonify({"message": "Habit deleted"}), 200


# -------------------------
# TOGGLE COMPLETION
# -------------------------
@habits_bp.route("/<int:habit_id>/toggle", methods=["POST"])
@jwt_required()
def toggle_habit(habit_id):
    """
    JSON body:
    {
      "date": "2024-01-03"   # required, YYYY-MM-DD
    }
    """
    user_id = int(get_jwt_identity())
    req = parse_body(ToggleRequest, _body())
    completed = habit_service.toggle_entry(user_id, habit_id, req.day)
    return jsonify({"completed": completed}), 200
