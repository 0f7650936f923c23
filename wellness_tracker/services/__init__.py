"""Service layer for the Wellness Tracker.

This package contains the logic that sits between the Flask route
handlers and the in-memory store: ordered queries, progress updates
and derived statistics. Nothing in this package performs any HTTP
handling. Services take the store explicitly, return plain Python
objects and raise the exceptions defined in
``wellness_tracker.errors`` when something goes wrong.
"""

from .query_service import (
    get_all_goals,
    get_all_habits,
    get_all_moods,
    get_all_reminders,
    get_moods_by_date,
    get_todays_mood,
)
from .progress_service import increment_habit, update_goal_progress, update_habit
from .stats_service import compute_mood_distribution, compute_stats

__all__ = [
    "get_all_goals",
    "get_all_habits",
    "get_all_moods",
    "get_all_reminders",
    "get_moods_by_date",
    "get_todays_mood",
    "increment_habit",
    "update_goal_progress",
    "update_habit",
    "compute_mood_distribution",
    "compute_stats",
]
