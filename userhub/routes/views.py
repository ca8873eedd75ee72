"""
Server-rendered pages for htmx clients.
"""
from flask import Blueprint, render_template

from userhub.services import get_user_service

views_bp = Blueprint('views', __name__)


@views_bp.route('/htmx-index')
def htmx_index():
    """Static page that pulls the user list fragment in."""
    return render_template('index.html')


@views_bp.route('/htmx-users')
def htmx_users():
    """HTML fragment listing users, swapped into the page by htmx."""
    users = get_user_service().list_users()
    return render_template('users.html', users=users)
