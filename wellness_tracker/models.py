"""
Entity records for the Wellness Tracker.

Each entity kind is a frozen dataclass. Records are snapshots owned
by the store: an update never mutates a record in place, it replaces
the stored snapshot with a merged copy. Entities refer to their owner
through ``user_id`` only; there are no object references between
records, so deleting a user leaves that user's habits, moods, goals
and reminders untouched.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from werkzeug.security import generate_password_hash, check_password_hash


class MoodLabel(enum.Enum):
    """Enumeration of the moods a user can log."""
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANGRY = "angry"
    TIRED = "tired"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return MOOD_EMOJIS[self]


MOOD_EMOJIS = {
    MoodLabel.HAPPY: "😊",
    MoodLabel.NEUTRAL: "😐",
    MoodLabel.SAD: "😢",
    MoodLabel.ANGRY: "😠",
    MoodLabel.TIRED: "😴",
}


@dataclass(frozen=True)
class User:
    """A user of the system.

    Only a salted hash of the password is kept. Usernames are unique
    across the store.
    """

    id: int
    username: str
    password_hash: str
    display_name: str
    avatar_url: Optional[str] = None

    @staticmethod
    def hash_password(password: str) -> str:
        return generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def __repr__(self) -> str:
        return f"<User {self.username}>"


@dataclass(frozen=True)
class Habit:
    """A recurring habit with a daily target.

    ``completed`` is set by whoever changes ``current_value``; it is not
    recomputed when only ``target_value`` or ``streak`` change.
    """

    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    target_value: int = 0
    current_value: int = 0
    units: str = ""
    icon_name: str = ""
    color: str = ""
    completed: bool = False
    streak: int = 0

    def __repr__(self) -> str:
        return f"<Habit {self.name} ({self.current_value}/{self.target_value})>"


@dataclass(frozen=True)
class Mood:
    """A single mood entry. Several entries per user per day are allowed."""

    id: int
    user_id: int
    mood: MoodLabel
    date: datetime
    emoji: str = ""
    notes: Optional[str] = None

    @property
    def display(self) -> str:
        """Label and emoji, e.g. ``"Happy 😊"``."""
        return f"{self.mood.label} {self.emoji}"

    def __repr__(self) -> str:
        return f"<Mood {self.mood.value} {self.date.isoformat()}>"


@dataclass(frozen=True)
class Goal:
    """A longer running goal measured against a numeric target."""

    id: int
    user_id: int
    name: str
    target_value: int
    description: Optional[str] = None
    current_value: int = 0
    units: str = ""
    deadline: Optional[datetime] = None
    completed: bool = False

    @property
    def progress_ratio(self) -> float:
        """``current_value / target_value``, or 0 when there is no target."""
        if not self.target_value or self.target_value <= 0:
            return 0.0
        return self.current_value / self.target_value

    def __repr__(self) -> str:
        return f"<Goal {self.name} ({self.current_value}/{self.target_value})>"


@dataclass(frozen=True)
class Reminder:
    """A one-off reminder at a single instant; there is no recurrence."""

    id: int
    user_id: int
    title: str
    time: datetime
    icon_name: str = ""
    is_active: bool = True

    def __repr__(self) -> str:
        return f"<Reminder {self.title} at {self.time.isoformat()}>"
