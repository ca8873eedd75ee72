"""
Landing and health routes.
"""
from flask import Blueprint, Response, jsonify

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Plain-text greeting."""
    return Response('Hello world', mimetype='text/plain')


@main_bp.route('/health')
def health():
    """Health check endpoint for uptime monitoring."""
    return jsonify({
        'status': 'healthy',
        'service': 'userhub'
    }), 200
