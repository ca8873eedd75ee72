"""
Validation utilities for incoming request bodies.
"""
from userhub.errors import BadRequestError


def extract_username(payload):
    """
    Pull the ``username`` field out of a create-user payload.

    Only the shape is checked: the body must be a JSON object whose
    ``username`` is a string. Empty strings and duplicates are accepted.
    """
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")

    if 'username' not in payload:
        raise BadRequestError("Missing field: username")

    username = payload['username']
    if not isinstance(username, str):
        raise BadRequestError("Field 'username' must be a string")

    return username
