"""Tests for the derived statistics."""
from datetime import datetime

import pytest

from wellness_tracker.models import Goal, Habit, Mood, MoodLabel
from wellness_tracker.seed import seed_demo_data
from wellness_tracker.services.stats_service import (
    NO_MOOD,
    compute_mood_distribution,
    compute_stats,
    goal_percentage,
    goal_progress_average,
    habits_complete,
    latest_mood_label,
    mood_distribution,
    round_half_up,
    streak_summary,
)
from wellness_tracker.store import WellnessStore

NOW = datetime(2024, 5, 15, 12, 0)


def _goal(current: int, target: int) -> Goal:
    return Goal(id=1, user_id=1, name="g", target_value=target, current_value=current)


def test_streak_summary() -> None:
    habits = [Habit(id=1, user_id=1, name="a", streak=5), Habit(id=2, user_id=1, name="b", streak=12)]
    assert streak_summary(habits) == 12
    assert streak_summary([]) == 0


def test_habits_complete() -> None:
    habits = [
        Habit(id=1, user_id=1, name="a", completed=True),
        Habit(id=2, user_id=1, name="b"),
        Habit(id=3, user_id=1, name="c", completed=True),
    ]
    assert habits_complete(habits) == "2/3"
    assert habits_complete([]) == "0/0"


def test_latest_mood_label() -> None:
    mood = Mood(id=1, user_id=1, mood=MoodLabel.HAPPY, emoji="😊", date=NOW)
    assert latest_mood_label(mood) == "Happy 😊"
    assert latest_mood_label(None) == NO_MOOD == "None"


@pytest.mark.parametrize(
    "value, expected",
    [(62.5, 63), (62.49, 62), (0.5, 1), (75.32, 75), (0, 0)],
)
def test_round_half_up(value, expected) -> None:
    assert round_half_up(value) == expected


def test_goal_percentage_is_capped_and_handles_missing_target() -> None:
    assert goal_percentage(_goal(5, 8)) == 63
    assert goal_percentage(_goal(15, 10)) == 100
    assert goal_percentage(_goal(3, 0)) == 0


def test_goal_progress_average() -> None:
    goals = [_goal(7532, 10000), _goal(6, 8), _goal(3, 10)]
    assert goal_progress_average(goals) == 60
    assert goal_progress_average([]) == 0
    assert goal_progress_average([_goal(20, 10), _goal(0, 10)]) == 50


def test_mood_distribution_includes_every_label() -> None:
    moods = [
        Mood(id=1, user_id=1, mood=MoodLabel.HAPPY, date=NOW),
        Mood(id=2, user_id=1, mood=MoodLabel.HAPPY, date=NOW),
        Mood(id=3, user_id=1, mood=MoodLabel.TIRED, date=NOW),
    ]
    assert mood_distribution(moods) == {"happy": 2, "neutral": 0, "sad": 0, "angry": 0, "tired": 1}
    assert set(mood_distribution([]).values()) == {0}


def test_compute_stats_over_demo_data() -> None:
    store = WellnessStore()
    user = seed_demo_data(store, now=NOW)

    summary = compute_stats(store, user.id, now=NOW)
    assert summary.streak == 12
    assert summary.habits_complete == "2/4"
    assert summary.mood == "Happy 😊"
    assert summary.goals == 60
    assert summary.to_display() == {
        "streak": "12 days",
        "habits_complete": "2/4",
        "mood": "Happy 😊",
        "goals": "60%",
    }


def test_compute_stats_without_data() -> None:
    summary = compute_stats(WellnessStore(), 1, now=NOW)
    assert summary.to_display() == {"streak": "0 days", "habits_complete": "0/0", "mood": "None", "goals": "0%"}


def test_compute_stats_reflects_latest_store_contents() -> None:
    store = WellnessStore()
    user = seed_demo_data(store, now=NOW)
    store.moods.create({"user_id": user.id, "mood": MoodLabel.SAD, "emoji": "😢", "date": NOW.replace(hour=20)})
    assert compute_stats(store, user.id, now=NOW.replace(hour=21)).mood == "Sad 😢"
    # tomorrow nothing has been logged yet
    assert compute_stats(store, user.id, now=datetime(2024, 5, 16, 8, 0)).mood == "None"


def test_compute_mood_distribution_over_demo_data() -> None:
    store = WellnessStore()
    user = seed_demo_data(store, now=NOW)
    assert compute_mood_distribution(store, user.id) == {
        "happy": 1,
        "neutral": 1,
        "sad": 0,
        "angry": 0,
        "tired": 1,
    }
