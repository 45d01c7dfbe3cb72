"""Error types raised by the service layer and their HTTP mapping.

Services raise these and never catch them; ``register_error_handlers`` is the
only place an error turns into a response.
"""

from flask import jsonify
from sqlalchemy.exc import IntegrityError

from app.extensions import db


class AppError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidArgument(AppError):
    """Missing or malformed identifier or payload field."""

    status_code = 400


class InvalidStatus(AppError):
    """Attendance status outside the fixed vocabulary."""

    status_code = 400


class NotFound(AppError):
    status_code = 404


class Forbidden(AppError):
    status_code = 403


class ParseFailure(AppError):
    """Stored meeting date/time could not be parsed.

    This points at corrupt data rather than a caller mistake, so it maps to a
    500-class response.
    """

    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        if isinstance(error, ParseFailure):
            app.logger.error("Unparseable meeting schedule: %s", error.message)
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        app.logger.warning("Integrity violation: %s", error.orig)
        return jsonify({"error": "Record conflicts with existing data"}), 400
