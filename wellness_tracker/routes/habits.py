"""
Routes for managing habits.

Habits are listed longest streak first. Users can only see and change
their own habits; touching another user's habit returns 403.
"""

from __future__ import annotations

from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..errors import NotFoundError
from ..schemas import HabitSchema
from ..services import get_all_habits, increment_habit, update_habit
from ..store import get_store


habits_bp = Blueprint("habits", __name__)


def _current_user_id() -> int:
    return int(get_jwt_identity())


def _get_habit(habit_id: int):
    habit = get_store().habits.get(habit_id)
    if habit is None:
        raise NotFoundError("Habit not found")
    return habit


@habits_bp.route("/habits", methods=["GET"])
@jwt_required()
def list_habits() -> tuple[list[dict], int]:
    """List the current user's habits."""
    habits = get_all_habits(get_store(), _current_user_id())
    return HabitSchema(many=True).dump(habits), 200


@habits_bp.route("/habits", methods=["POST"])
@jwt_required()
def create_habit() -> tuple[dict, int]:
    """Create a habit for the current user. Requires ``name``."""
    data = HabitSchema().load(request.get_json() or {})
    habit = get_store().habits.create({**data, "user_id": _current_user_id()})
    return HabitSchema().dump(habit), 201


@habits_bp.route("/habits/<int:habit_id>", methods=["PATCH"])
@jwt_required()
def patch_habit(habit_id: int) -> tuple[dict, int]:
    """Update some fields of a habit.

    Supplying ``current_value`` recomputes ``completed``.
    """
    habit = _get_habit(habit_id)
    if habit.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    changes = HabitSchema(partial=True).load(request.get_json() or {})
    updated = update_habit(get_store(), habit_id, changes)
    return HabitSchema().dump(updated), 200


@habits_bp.route("/habits/<int:habit_id>/increment", methods=["POST"])
@jwt_required()
def increment(habit_id: int) -> tuple[dict, int]:
    """Bump a habit's progress by ``value`` (1 when missing or not a number)."""
    habit = _get_habit(habit_id)
    if habit.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    data = request.get_json(silent=True) or {}
    value = data.get("value") if isinstance(data, dict) else None
    updated = increment_habit(get_store(), habit_id, value)
    return HabitSchema().dump(updated), 200


@habits_bp.route("/habits/<int:habit_id>", methods=["DELETE"])
@jwt_required()
def delete_habit(habit_id: int) -> tuple[dict, int]:
    """Delete a habit. Deleting a habit that does not exist succeeds."""
    store = get_store()
    habit = store.habits.get(habit_id)
    if habit is not None and habit.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    store.habits.delete(habit_id)
    return {"message": "Habit deleted successfully"}, 200
