"""
Typed service errors and their central mapping to HTTP responses.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for failures that map to a client-visible response."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ServiceError):
    status_code = 400


class StorageError(ServiceError):
    """A query or insert against the users table failed."""
    status_code = 500


class StorageUnavailableError(StorageError):
    """No pooled connection became free before the acquire timeout."""
    status_code = 503


class StorageInitError(RuntimeError):
    """
    Raised when the database file or the users table cannot be created.
    Never turned into a response: startup aborts instead.
    """


def _error_response(message, status_code):
    return jsonify({'error': message}), status_code


def register_error_handlers(app):
    """Map service errors and framework errors to JSON bodies."""

    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return _error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response, status_code = _error_response(error.description, error.code)
        # Keep headers such as Allow on 405s.
        for header, value in error.get_response().headers.items():
            if header not in ('Content-Type', 'Content-Length'):
                response.headers[header] = value
        return response, status_code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.error(f"Unhandled error while serving request: {error}", exc_info=True)
        return _error_response('Internal server error', 500)
