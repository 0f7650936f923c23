"""
Authentication and user routes for the Wellness Tracker.

Provides endpoints for registering new users, logging in to obtain a
JSON Web Token (JWT) and reading the profile of the authenticated
user. The token is required for every other resource of the API.
"""

from __future__ import annotations

from flask import Blueprint, request
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required

from ..errors import NotFoundError
from ..schemas import LoginSchema, RegisterSchema, UserSchema
from ..store import get_store


users_bp = Blueprint("users", __name__)


@users_bp.route("/register", methods=["POST"])
def register() -> tuple[dict, int]:
    """Register a new user.

    Expects JSON with ``username``, ``password``, ``display_name`` and an
    optional ``avatar_url``. Usernames must be unique.
    """
    data = RegisterSchema().load(request.get_json() or {})
    user = get_store().create_user(
        data["username"].strip(),
        data["password"],
        data["display_name"].strip(),
        avatar_url=data.get("avatar_url"),
    )
    return UserSchema().dump(user), 201


@users_bp.route("/login", methods=["POST"])
def login() -> tuple[dict, int]:
    """Authenticate a user and return a JWT.

    Expects JSON with ``username`` and ``password``. Invalid credentials
    return 401.
    """
    data = LoginSchema().load(request.get_json() or {})
    user = get_store().get_user_by_username(data["username"].strip())
    if not user or not user.check_password(data["password"]):
        return {"error": "Invalid username or password."}, 401

    access_token = create_access_token(identity=str(user.id))
    return {"access_token": access_token, "user": UserSchema().dump(user)}, 200


@users_bp.route("/users/current", methods=["GET"])
@jwt_required()
def current_user() -> tuple[dict, int]:
    """Return the profile of the authenticated user."""
    user = get_store().users.get(int(get_jwt_identity()))
    if user is None:
        raise NotFoundError("User not found")
    return UserSchema().dump(user), 200
