"""
Routes for logging moods.

A mood entry is always stamped with the server's current local time.
Several entries per day are allowed; "today's mood" is the most
recent entry of the current day.
"""

from __future__ import annotations

from datetime import datetime
from dateutil.parser import parse as parse_date  # type: ignore

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..errors import ValidationError
from ..schemas import MoodSchema
from ..services import get_all_moods, get_moods_by_date, get_todays_mood
from ..store import get_store


moods_bp = Blueprint("moods", __name__)


def _current_user_id() -> int:
    return int(get_jwt_identity())


@moods_bp.route("/moods/today", methods=["GET"])
@jwt_required()
def todays_mood():
    """Return the latest mood logged today, or ``null``."""
    mood = get_todays_mood(get_store(), _current_user_id())
    if mood is None:
        return jsonify(None), 200
    return MoodSchema().dump(mood), 200


@moods_bp.route("/moods/history", methods=["GET"])
@jwt_required()
def mood_history() -> tuple[list[dict], int]:
    """List every mood of the current user, most recent first."""
    moods = get_all_moods(get_store(), _current_user_id())
    return MoodSchema(many=True).dump(moods), 200


@moods_bp.route("/moods", methods=["GET"])
@jwt_required()
def moods_on_day() -> tuple[list[dict], int]:
    """List the moods logged on ``?date=YYYY-MM-DD`` (defaults to today)."""
    date_str = request.args.get("date")
    day = datetime.now()
    if date_str:
        try:
            day = parse_date(date_str)
        except (ValueError, OverflowError):
            raise ValidationError(
                "Invalid date format. Use ISO 8601 (YYYY-MM-DD).",
                fields={"date": ["Not a valid date."]},
            )
    moods = get_moods_by_date(get_store(), _current_user_id(), day)
    return MoodSchema(many=True).dump(moods), 200


@moods_bp.route("/moods", methods=["POST"])
@jwt_required()
def create_mood() -> tuple[dict, int]:
    """Log a mood. Requires ``mood``; ``emoji`` defaults to the mood's own."""
    data = MoodSchema().load(request.get_json() or {})
    mood = get_store().moods.create({**data, "user_id": _current_user_id(), "date": datetime.now()})
    return MoodSchema().dump(mood), 201


@moods_bp.route("/moods/<int:mood_id>", methods=["DELETE"])
@jwt_required()
def delete_mood(mood_id: int) -> tuple[dict, int]:
    """Delete a mood entry. Deleting a missing entry succeeds."""
    store = get_store()
    mood = store.moods.get(mood_id)
    if mood is not None and mood.user_id != _current_user_id():
        return {"error": "Forbidden"}, 403
    store.moods.delete(mood_id)
    return {"message": "Mood deleted successfully"}, 200
