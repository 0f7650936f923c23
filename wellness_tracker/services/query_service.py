"""Ordered, filtered views over the store.

Nothing in this module mutates the store. Every function returns a
new list, filtered to one user and sorted by the ordering of that
entity kind. Python's sort is stable, so records that compare equal
keep their insertion order.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import List, Optional, Union

from ..models import Goal, Habit, Mood, Reminder
from ..store import WellnessStore


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def day_bounds(day: Union[date, datetime]) -> tuple[datetime, datetime]:
    """Return ``(start_of_day, end_of_day)`` for ``day`` in local time.

    Both bounds are inclusive: the end is the last microsecond of the day.
    """
    if isinstance(day, datetime):
        day = to_local_naive(day).date()
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def get_all_habits(store: WellnessStore, user_id: int) -> List[Habit]:
    """Habits of ``user_id``, longest streak first."""
    habits = store.habits.get_all_for_user(user_id)
    return sorted(habits, key=lambda habit: habit.streak or 0, reverse=True)


def get_all_moods(store: WellnessStore, user_id: int) -> List[Mood]:
    """Moods of ``user_id``, most recent first."""
    moods = store.moods.get_all_for_user(user_id)
    return sorted(moods, key=lambda mood: mood.date, reverse=True)


def get_moods_by_date(store: WellnessStore, user_id: int, day: Union[date, datetime]) -> List[Mood]:
    """Moods of ``user_id`` logged on ``day``, most recent first."""
    start, end = day_bounds(day)
    return [mood for mood in get_all_moods(store, user_id) if start <= mood.date <= end]


def get_todays_mood(store: WellnessStore, user_id: int, now: Optional[datetime] = None) -> Optional[Mood]:
    """The latest mood logged today, or ``None``."""
    moods = get_moods_by_date(store, user_id, now or datetime.now())
    return moods[0] if moods else None


def _goal_sort_key(goal: Goal) -> tuple[bool, float]:
    # completed goals all share the same key and keep their relative order
    if goal.completed:
        return True, 0.0
    return False, -goal.progress_ratio


def get_all_goals(store: WellnessStore, user_id: int) -> List[Goal]:
    """Goals of ``user_id``: incomplete ones by descending progress, then completed ones."""
    return sorted(store.goals.get_all_for_user(user_id), key=_goal_sort_key)


def get_all_reminders(store: WellnessStore, user_id: int) -> List[Reminder]:
    """Reminders of ``user_id``, earliest first."""
    return sorted(store.reminders.get_all_for_user(user_id), key=lambda reminder: reminder.time)
