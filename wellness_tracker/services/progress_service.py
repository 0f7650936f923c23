"""Progress updates for habits and goals.

These are the two places where ``completed`` is recomputed from the
values of a record: bumping a habit and setting the progress of a
goal. A plain patch of a habit that supplies ``current_value`` goes
through :func:`update_habit` and gets the same treatment.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from ..errors import NotFoundError
from ..models import Goal, Habit
from ..store import WellnessStore

logger = logging.getLogger(__name__)

DEFAULT_INCREMENT = 1


def coerce_increment(value: Any) -> int:
    """Return ``value`` if it is a whole number, else the default step of 1.

    Habit values are integers, so fractional steps also count as 1.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_INCREMENT
    return value


def increment_habit(store: WellnessStore, habit_id: int, value: Any = None) -> Habit:
    """Bump a habit's ``current_value``, capped at its target.

    Raises
    ------
    NotFoundError
        If the habit does not exist.
    """
    habit = store.habits.get(habit_id)
    if habit is None:
        raise NotFoundError("Habit not found")
    new_value = min(habit.current_value + coerce_increment(value), habit.target_value)
    updated = store.habits.update(
        habit_id,
        {"current_value": new_value, "completed": new_value == habit.target_value},
    )
    logger.info(f"Habit {habit_id} incremented to {new_value}/{habit.target_value}")
    return updated


def update_habit(store: WellnessStore, habit_id: int, changes: Mapping) -> Habit:
    """Apply a partial update to a habit.

    When ``changes`` carries ``current_value`` the ``completed`` flag is
    recomputed against the (possibly also changed) target. Other patches
    are merged as given.
    """
    habit = store.habits.get(habit_id)
    if habit is None:
        raise NotFoundError("Habit not found")
    changes = dict(changes)
    if "current_value" in changes:
        target = changes.get("target_value", habit.target_value)
        changes["completed"] = changes["current_value"] == target
    return store.habits.update(habit_id, changes)


def update_goal_progress(store: WellnessStore, goal_id: int, value: float) -> Goal:
    """Set a goal's ``current_value``, clamped into ``[0, target_value]``.

    Raises
    ------
    NotFoundError
        If the goal does not exist.
    """
    goal = store.goals.get(goal_id)
    if goal is None:
        raise NotFoundError("Goal not found")
    new_value = min(max(0, value), goal.target_value)
    updated = store.goals.update(
        goal_id,
        {"current_value": new_value, "completed": new_value == goal.target_value},
    )
    logger.info(f"Goal {goal_id} progress set to {new_value}/{goal.target_value}")
    return updated
