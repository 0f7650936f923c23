"""
Serialization schemas using Marshmallow for the Wellness Tracker.

The same schema is used in both directions: ``load`` validates a
request body and returns a plain ``dict`` ready for the store, while
``dump`` turns a record into JSON-friendly output. Loading with
``partial=True`` validates the fields of a patch. Sensitive fields,
such as password hashes, are never dumped.
"""

from __future__ import annotations

from marshmallow import Schema, fields, validate, post_load, RAISE

from .models import MoodLabel
from .services.query_service import to_local_naive
from .util.sanitization import clean_optional


class LocalDateTime(fields.DateTime):
    """ISO 8601 datetime, normalised to naive local time on load."""

    def _deserialize(self, value, attr, data, **kwargs):
        result = super()._deserialize(value, attr, data, **kwargs)
        return to_local_naive(result)


class BaseSchema(Schema):
    class Meta:
        unknown = RAISE


class UserSchema(BaseSchema):
    """Schema for serialising ``User`` records."""

    id = fields.Integer(dump_only=True)
    username = fields.String(required=True, validate=validate.Length(min=1, max=50))
    display_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    avatar_url = fields.String(allow_none=True, validate=validate.Length(max=500))


class RegisterSchema(UserSchema):
    """Registration payload: a user plus a password."""

    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6))


class LoginSchema(BaseSchema):
    username = fields.String(required=True)
    password = fields.String(required=True, load_only=True)


class HabitSchema(BaseSchema):
    """Schema for ``Habit`` records."""

    id = fields.Integer(dump_only=True)
    user_id = fields.Integer(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    description = fields.String(allow_none=True, validate=validate.Length(max=255))
    target_value = fields.Integer(validate=validate.Range(min=0))
    current_value = fields.Integer(validate=validate.Range(min=0))
    units = fields.String(validate=validate.Length(max=50))
    icon_name = fields.String(validate=validate.Length(max=50))
    color = fields.String(validate=validate.Length(max=30))
    completed = fields.Boolean()
    streak = fields.Integer(validate=validate.Range(min=0))

    @post_load
    def clean_text(self, data, **kwargs):
        if "description" in data:
            data["description"] = clean_optional(data["description"])
        return data


class MoodSchema(BaseSchema):
    """Schema for ``Mood`` entries. The date is set by the server."""

    id = fields.Integer(dump_only=True)
    user_id = fields.Integer(dump_only=True)
    mood = fields.Enum(MoodLabel, by_value=True, required=True)
    emoji = fields.String(validate=validate.Length(max=16))
    notes = fields.String(allow_none=True, validate=validate.Length(max=500))
    date = fields.DateTime(dump_only=True)

    @post_load
    def fill_defaults(self, data, **kwargs):
        if "notes" in data:
            data["notes"] = clean_optional(data["notes"])
        if not data.get("emoji") and "mood" in data:
            data["emoji"] = data["mood"].emoji
        return data


class GoalSchema(BaseSchema):
    """Schema for ``Goal`` records."""

    id = fields.Integer(dump_only=True)
    user_id = fields.Integer(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    description = fields.String(allow_none=True, validate=validate.Length(max=255))
    target_value = fields.Integer(required=True, validate=validate.Range(min=0))
    current_value = fields.Integer(validate=validate.Range(min=0))
    units = fields.String(validate=validate.Length(max=50))
    deadline = LocalDateTime(allow_none=True)
    completed = fields.Boolean()

    @post_load
    def clean_text(self, data, **kwargs):
        if "description" in data:
            data["description"] = clean_optional(data["description"])
        return data

    @post_load
    def clamp_progress(self, data, **kwargs):
        # current_value stays within [0, target_value] from the first insert
        if "target_value" in data:
            current = min(data.get("current_value", 0), data["target_value"])
            data["current_value"] = current
            data["completed"] = current == data["target_value"]
        return data


class GoalProgressSchema(BaseSchema):
    # negative values are accepted here and clamped to 0 by the service
    current_value = fields.Integer(required=True)


class ReminderSchema(BaseSchema):
    """Schema for ``Reminder`` records."""

    id = fields.Integer(dump_only=True)
    user_id = fields.Integer(dump_only=True)
    title = fields.String(required=True, validate=validate.Length(min=1, max=100))
    time = LocalDateTime(required=True)
    icon_name = fields.String(validate=validate.Length(max=50))
    is_active = fields.Boolean(dump_only=True)
