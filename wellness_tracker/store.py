"""In-memory entity store.

The store replaces a database for this application: it holds every
record for the lifetime of the process and nothing is persisted. Each
entity kind lives in its own :class:`EntityCollection` with a private
``next_id`` counter, so ids are strictly increasing and never reused,
even after a record has been deleted.

A single :class:`WellnessStore` is built by the application factory
and handed to request handlers through ``app.extensions``; see
:func:`get_store`.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import MISSING, fields as dataclass_fields, replace
from typing import Callable, Generic, Mapping, Optional, Type, TypeVar

from flask import current_app

from .errors import ConflictError, NotFoundError, ValidationError
from .models import Goal, Habit, Mood, Reminder, User

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXTENSION_KEY = "wellness_store"


class EntityCollection(Generic[T]):
    """Keyed container for one entity kind.

    Records are frozen dataclass instances. ``create`` and ``update``
    run under the collection's lock so that id assignment and the
    read-merge-write of an update are single critical sections.
    """

    def __init__(self, model: Type[T], kind: Optional[str] = None) -> None:
        self.model = model
        self.kind = kind or model.__name__
        self.next_id = 1
        self._records: dict[int, T] = {}
        self._lock = threading.Lock()
        self._field_names = {f.name for f in dataclass_fields(model)}
        self._required = {
            f.name
            for f in dataclass_fields(model)
            if f.default is MISSING and f.default_factory is MISSING and f.name != "id"
        }

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._records

    def get(self, entity_id: int) -> Optional[T]:
        """Return the record with ``entity_id`` or ``None``."""
        with self._lock:
            return self._records.get(entity_id)

    def all(self) -> list[T]:
        """All records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [record for record in self.all() if predicate(record)]

    def get_all_for_user(self, user_id: int) -> list[T]:
        """Records owned by ``user_id``, unordered (insertion order)."""
        return self.filter(lambda record: getattr(record, "user_id", None) == user_id)

    def create(self, values: Mapping) -> T:
        """Store a new record and return it.

        Raises
        ------
        ValidationError
            If ``values`` contains unknown fields, tries to set ``id``,
            or misses a required field.
        """
        self._check_fields(values, creating=True)
        with self._lock:
            entity_id = self.next_id
            self.next_id += 1
            record = self.model(id=entity_id, **values)
            self._records[entity_id] = record
        logger.debug(f"Created {self.kind} {entity_id}")
        return record

    def update(self, entity_id: int, changes: Mapping) -> T:
        """Merge ``changes`` over the stored record and return the result.

        Keys present in ``changes`` overwrite, every other field keeps
        its stored value.

        Raises
        ------
        NotFoundError
            If no record with ``entity_id`` exists.
        """
        self._check_fields(changes, creating=False)
        with self._lock:
            existing = self._records.get(entity_id)
            if existing is None:
                raise NotFoundError(f"{self.kind} not found")
            updated = replace(existing, **changes)
            self._records[entity_id] = updated
        return updated

    def delete(self, entity_id: int) -> None:
        """Remove the record if present. Deleting a missing id is a no-op."""
        with self._lock:
            removed = self._records.pop(entity_id, None)
        if removed is not None:
            logger.debug(f"Deleted {self.kind} {entity_id}")

    def _check_fields(self, values: Mapping, creating: bool) -> None:
        if "id" in values:
            raise ValidationError("The id of a record cannot be set.", fields={"id": ["Read-only field."]})
        unknown = set(values) - self._field_names
        if unknown:
            raise ValidationError(
                f"Unknown fields for {self.kind}.",
                fields={name: ["Unknown field."] for name in sorted(unknown)},
            )
        if creating:
            missing = self._required - set(values)
            if missing:
                raise ValidationError(
                    f"Missing fields for {self.kind}.",
                    fields={name: ["Missing data for required field."] for name in sorted(missing)},
                )


class WellnessStore:
    """Holds the five entity collections of the application."""

    def __init__(self) -> None:
        self.users: EntityCollection[User] = EntityCollection(User)
        self.habits: EntityCollection[Habit] = EntityCollection(Habit)
        self.moods: EntityCollection[Mood] = EntityCollection(Mood)
        self.goals: EntityCollection[Goal] = EntityCollection(Goal)
        self.reminders: EntityCollection[Reminder] = EntityCollection(Reminder)
        self._user_lock = threading.Lock()

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.all():
            if user.username == username:
                return user
        return None

    def create_user(self, username: str, password: str, display_name: str, avatar_url: Optional[str] = None) -> User:
        """Create a user with a hashed password.

        Raises
        ------
        ConflictError
            If the username is already taken.
        """
        # the uniqueness check and the insert must not interleave
        with self._user_lock:
            if self.get_user_by_username(username) is not None:
                raise ConflictError("A user with that username already exists.")
            return self.users.create(
                {
                    "username": username,
                    "password_hash": User.hash_password(password),
                    "display_name": display_name,
                    "avatar_url": avatar_url,
                }
            )


def get_store() -> WellnessStore:
    """Return the store bound to the current Flask application."""
    return current_app.extensions[EXTENSION_KEY]
