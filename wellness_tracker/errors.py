"""Centralised error handling and custom exceptions.

This module defines the exceptions raised by the store and the
service layer, and the Flask error handlers that serialise them into
JSON responses. The store and services never deal with HTTP status
codes directly; the application factory registers these handlers so
that each exception maps onto the right response.
"""
from __future__ import annotations

import logging

from flask import jsonify
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, fields: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = fields or {}

    @classmethod
    def from_schema_error(cls, err: SchemaValidationError) -> "ValidationError":
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        return cls("Invalid input.", fields=messages)

    def to_response(self, status_code: int = 400):
        response = {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": self.message,
                "fields": self.fields,
            }
        }
        return jsonify(response), status_code


class NotFoundError(Exception):
    """Raised when a requested entity cannot be found."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 404):
        response = {
            "error": {
                "code": "NOT_FOUND",
                "message": self.message,
            }
        }
        return jsonify(response), status_code


class ConflictError(Exception):
    """Raised when a uniqueness conflict occurs (e.g. a taken username)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 409):
        response = {
            "error": {
                "code": "CONFLICT",
                "message": self.message,
            }
        }
        return jsonify(response), status_code


class InternalError(Exception):
    """Raised for unexpected failures while accessing the store.

    The message returned to clients is always generic; details are
    only written to the log.
    """

    def __init__(self, message: str = "An unexpected error occurred.") -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 500):
        response = {
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
            }
        }
        return jsonify(response), status_code


def register_error_handlers(app) -> None:
    """Register custom error handlers on the given Flask app."""
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return err.to_response(400)

    @app.errorhandler(SchemaValidationError)
    def handle_schema_validation_error(err: SchemaValidationError):
        return ValidationError.from_schema_error(err).to_response(400)

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(err: NotFoundError):
        return err.to_response(404)

    @app.errorhandler(ConflictError)
    def handle_conflict_error(err: ConflictError):
        return err.to_response(409)

    @app.errorhandler(InternalError)
    def handle_internal_error(err: InternalError):
        logger.error(f"Internal error: {err.message}")
        return err.to_response(500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Let Flask render its own 404/405 etc.
        if isinstance(err, HTTPException):
            return err
        logger.exception("Unhandled exception while processing request")
        return InternalError().to_response(500)
