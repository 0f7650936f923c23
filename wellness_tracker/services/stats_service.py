"""Derived statistics for the dashboard and insights views.

Every value here is computed from the current contents of the store
at call time; nothing is cached or updated incrementally. The
functions taking lists are pure and easy to unit test, while
:func:`compute_stats` assembles them for one user through the query
layer.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ..models import Goal, Habit, Mood, MoodLabel
from ..store import WellnessStore
from .query_service import get_all_goals, get_all_habits, get_all_moods, get_todays_mood

NO_MOOD = "None"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    The builtin ``round`` rounds halves to even, which would turn a
    progress of 62.5% into 62.
    """
    return int(math.floor(value + 0.5))


def streak_summary(habits: List[Habit]) -> int:
    """Longest streak over ``habits``, 0 when there are none."""
    return max((habit.streak or 0 for habit in habits), default=0)


def habits_complete(habits: List[Habit]) -> str:
    """``"<completed>/<total>"`` for ``habits``."""
    completed = sum(1 for habit in habits if habit.completed)
    return f"{completed}/{len(habits)}"


def latest_mood_label(mood: Optional[Mood]) -> str:
    """Label and emoji of ``mood``, or ``"None"`` when nothing was logged."""
    if mood is None:
        return NO_MOOD
    return mood.display


def goal_percentage(goal: Goal) -> int:
    """Progress of one goal as a whole percentage between 0 and 100."""
    if not goal.target_value or goal.target_value <= 0:
        return 0
    return min(100, round_half_up(goal.current_value / goal.target_value * 100))


def goal_progress_average(goals: List[Goal]) -> int:
    """Mean of the per-goal percentages, rounded; 0 without goals."""
    if not goals:
        return 0
    return round_half_up(sum(goal_percentage(goal) for goal in goals) / len(goals))


def mood_distribution(moods: List[Mood]) -> Dict[str, int]:
    """Count of entries per mood label. Labels never logged map to 0."""
    counts = {label.value: 0 for label in MoodLabel}
    for mood in moods:
        counts[mood.mood.value] += 1
    return counts


@dataclass(frozen=True)
class StatsSummary:
    """Dashboard numbers for one user."""

    streak: int
    habits_complete: str
    mood: str
    goals: int

    def to_display(self) -> dict[str, str]:
        """Render the summary the way the dashboard shows it."""
        return {
            "streak": f"{self.streak} days",
            "habits_complete": self.habits_complete,
            "mood": self.mood,
            "goals": f"{self.goals}%",
        }


def compute_stats(store: WellnessStore, user_id: int, now: Optional[datetime] = None) -> StatsSummary:
    """Compute the dashboard summary for ``user_id``.

    Parameters
    ----------
    store: WellnessStore
        The store to read from.
    user_id: int
        Owner of the habits, moods and goals to summarise.
    now: datetime, optional
        Reference time deciding what "today" is. Defaults to the
        current local time.

    Returns
    -------
    StatsSummary
        Longest streak, completed habit ratio, today's latest mood and
        the average goal progress.
    """
    habits = get_all_habits(store, user_id)
    goals = get_all_goals(store, user_id)
    return StatsSummary(
        streak=streak_summary(habits),
        habits_complete=habits_complete(habits),
        mood=latest_mood_label(get_todays_mood(store, user_id, now)),
        goals=goal_progress_average(goals),
    )


def compute_mood_distribution(store: WellnessStore, user_id: int) -> Dict[str, int]:
    """Mood distribution over every entry ``user_id`` has logged."""
    return mood_distribution(get_all_moods(store, user_id))
