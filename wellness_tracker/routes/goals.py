"""
Routes for managing goals.

Goals are listed with unfinished goals first, the closest to
completion at the top. Progress is set explicitly and clamped into
``[0, target_value]``.
"""

from __future__ import annotations

from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..errors import NotFoundError
from ..schemas import GoalProgressSchema, GoalSchema
from ..services import get_all_goals, update_goal_progress
from ..store import get_store


goals_bp = Blueprint("goals", __name__)


def _current_user_id() -> int:
    return int(get_jwt_identity())


@goals_bp.route("/goals", methods=["GET"])
@jwt_required()
def list_goals() -> tuple[list[dict], int]:
    """List the current user's goals."""
    goals = get_all_goals(get_store(), _current_user_id())
    return GoalSchema(many=True).dump(goals), 200


@goals_bp.route("/goals", methods=["POST"])
@jwt_required()
def create_goal() -> tuple[dict, int]:
    """Create a goal. Requires ``name`` and ``target_value``."""
    data = GoalSchema().load(request.get_json() or {})
    goal = get_store().goals.create({**data, "user_id": _current_user_id()})
    return GoalSchema().dump(goal), 201


@goals_bp.route("/goals/<int:goal_id>/progress", methods=["PATCH"])
@jwt_required()
def set_progress(goal_id: int) -> tuple[dict, int]:
    """Set a goal's ``current_value``.

    Values below 0 become 0 and values above the target become the
    target; reaching the target marks the goal completed.
    """
    store = get_store()
    goal = store.goals.get(goal_id)
    if goal is None:
        raise NotFoundError("Goal not found")
    if goal.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    data = GoalProgressSchema().load(request.get_json() or {})
    updated = update_goal_progress(store, goal_id, data["current_value"])
    return GoalSchema().dump(updated), 200


@goals_bp.route("/goals/<int:goal_id>", methods=["DELETE"])
@jwt_required()
def delete_goal(goal_id: int) -> tuple[dict, int]:
    """Delete a goal. Deleting a missing goal succeeds."""
    store = get_store()
    goal = store.goals.get(goal_id)
    if goal is not None and goal.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    store.goals.delete(goal_id)
    return {"message": "Goal deleted successfully"}, 200
