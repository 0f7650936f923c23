"""Demo data for development.

The application factory calls :func:`seed_demo_data` when
``SEED_DEMO_DATA`` is enabled, which is the default outside of
production. Records are inserted through the ordinary store ``create``
path so the id counters stay consistent with later inserts.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from .models import MoodLabel, User
from .store import WellnessStore

logger = logging.getLogger(__name__)

DEMO_USERNAME = "jorge"
DEMO_PASSWORD = "password123"
DEMO_AVATAR = "https://images.unsplash.com/photo-1534528741775-53994a69daeb?auto=format&fit=crop&w=256&q=80"


def seed_demo_data(store: WellnessStore, now: Optional[datetime] = None) -> User:
    """Insert a demo user with habits, moods, goals and reminders.

    Returns the demo user.
    """
    now = now or datetime.now()
    user = store.create_user(DEMO_USERNAME, DEMO_PASSWORD, "Jorge", avatar_url=DEMO_AVATAR)

    habits = [
        {
            "name": "Drink 8 glasses of water",
            "description": "Stay hydrated throughout the day",
            "target_value": 8,
            "current_value": 6,
            "units": "glasses",
            "icon_name": "water",
            "color": "blue",
            "completed": False,
            "streak": 5,
        },
        {
            "name": "Meditation",
            "description": "15 minutes daily meditation",
            "icon_name": "meditation",
            "color": "purple",
            "completed": True,
            "streak": 12,
        },
        {
            "name": "Exercise",
            "description": "30 minutes workout",
            "icon_name": "exercise",
            "color": "green",
            "completed": False,
            "streak": 0,
        },
        {
            "name": "Read a book",
            "description": "Read for at least 20 minutes",
            "icon_name": "book",
            "color": "orange",
            "completed": True,
            "streak": 3,
        },
    ]
    for habit in habits:
        store.habits.create({"user_id": user.id, **habit})

    moods = [
        (MoodLabel.HAPPY, "Had a great day today! Completed most of my tasks and had time for self-care.", now),
        (MoodLabel.NEUTRAL, "Average day, nothing special.", now - timedelta(days=1)),
        (MoodLabel.TIRED, "Didn't sleep well last night.", now - timedelta(days=2)),
    ]
    for label, notes, logged_at in moods:
        store.moods.create(
            {"user_id": user.id, "mood": label, "emoji": label.emoji, "notes": notes, "date": logged_at}
        )

    goals = [
        {
            "name": "10,000 Steps Daily",
            "description": "Walk 10,000 steps every day",
            "target_value": 10000,
            "current_value": 7532,
            "units": "steps",
            "deadline": now + relativedelta(months=1),
        },
        {
            "name": "Sleep 8 Hours",
            "description": "Get 8 hours of sleep every night",
            "target_value": 8,
            "current_value": 6,
            "units": "hours",
        },
        {
            "name": "Read 10 Books",
            "description": "Read 10 books this year",
            "target_value": 10,
            "current_value": 3,
            "units": "books",
        },
    ]
    for goal in goals:
        store.goals.create({"user_id": user.id, **goal})

    tomorrow = now + timedelta(days=1)
    reminders = [
        ("Drink water", now.replace(hour=15, minute=0, second=0, microsecond=0), "water"),
        ("Meditation", now.replace(hour=18, minute=30, second=0, microsecond=0), "meditation"),
        ("Log your mood", tomorrow.replace(hour=9, minute=0, second=0, microsecond=0), "mood"),
    ]
    for title, at, icon in reminders:
        store.reminders.create({"user_id": user.id, "title": title, "time": at, "icon_name": icon})

    logger.info(f"Seeded demo data for user '{user.username}'")
    return user
