"""Routes for reminders. Reminders are listed earliest first."""

from __future__ import annotations

from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..schemas import ReminderSchema
from ..services import get_all_reminders
from ..store import get_store


reminders_bp = Blueprint("reminders", __name__)


def _current_user_id() -> int:
    return int(get_jwt_identity())


@reminders_bp.route("/reminders", methods=["GET"])
@jwt_required()
def list_reminders() -> tuple[list[dict], int]:
    reminders = get_all_reminders(get_store(), _current_user_id())
    return ReminderSchema(many=True).dump(reminders), 200


@reminders_bp.route("/reminders", methods=["POST"])
@jwt_required()
def create_reminder() -> tuple[dict, int]:
    """Create a reminder. Requires ``title`` and ``time``; it starts active."""
    data = ReminderSchema().load(request.get_json() or {})
    reminder = get_store().reminders.create({**data, "user_id": _current_user_id(), "is_active": True})
    return ReminderSchema().dump(reminder), 201


@reminders_bp.route("/reminders/<int:reminder_id>", methods=["DELETE"])
@jwt_required()
def delete_reminder(reminder_id: int) -> tuple[dict, int]:
    store = get_store()
    reminder = store.reminders.get(reminder_id)
    if reminder is not None and reminder.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    store.reminders.delete(reminder_id)
    return {"message": "Reminder deleted successfully"}, 200
