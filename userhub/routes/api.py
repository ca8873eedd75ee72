"""
JSON user API.
"""
from flask import Blueprint, jsonify, request

from userhub.services import get_user_service
from userhub.utils.validators import extract_username

api_bp = Blueprint('api', __name__)


@api_bp.route('/users', methods=['GET'])
def list_users():
    """Every stored user, in insertion order."""
    users = get_user_service().list_users()
    return jsonify(users), 200


@api_bp.route('/users', methods=['POST'])
def create_user():
    """
    Create a user from ``{"username": "..."}``.
    Responds 201 with the stored row, including its assigned id.
    """
    # Invalid JSON (400) or a non-JSON content type (415) is rejected by werkzeug.
    payload = request.get_json()
    username = extract_username(payload)
    user = get_user_service().create_user(username)
    return jsonify(user), 201
