"""Routes for derived statistics.

This blueprint exposes the dashboard summary and the mood
distribution. The heavy lifting is delegated to
``wellness_tracker.services.stats_service``.
"""
from __future__ import annotations

from flask import Blueprint
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import compute_mood_distribution, compute_stats
from ..store import get_store

stats_bp = Blueprint("stats", __name__)


def _current_user_id() -> int:
    return int(get_jwt_identity())


@stats_bp.route("/stats", methods=["GET"])
@jwt_required()
def dashboard_stats() -> tuple[dict, int]:
    """Return the dashboard summary for the current user.

    Contains the longest habit streak, how many habits are completed,
    the latest mood logged today and the average goal progress.
    """
    summary = compute_stats(get_store(), _current_user_id())
    return summary.to_display(), 200


@stats_bp.route("/stats/moods", methods=["GET"])
@jwt_required()
def mood_stats() -> tuple[dict, int]:
    """Return how often the current user logged each mood."""
    return compute_mood_distribution(get_store(), _current_user_id()), 200
