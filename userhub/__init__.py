"""
Main Flask application factory.
"""
import logging

from flask import Flask

from userhub.config import Config
from userhub.database import Database
from userhub.errors import register_error_handlers
from userhub.services import UserService

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, PUT, PATCH, DELETE, OPTIONS',
    'Access-Control-Allow-Headers': '*',
}


def create_app(config_class=Config):
    """
    Create and configure the Flask application.

    Raises ``StorageInitError`` when the database cannot be prepared; callers
    must not serve traffic in that case.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize persistence + service layer before any route is reachable
    database = Database.from_config(app.config)
    database.init()
    app.extensions['userhub.database'] = database
    app.extensions['userhub.user_service'] = UserService(database)

    # Register blueprints
    from userhub.routes.main import main_bp
    from userhub.routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)

    if app.config['ENABLE_HTML_VIEWS']:
        from userhub.routes.views import views_bp
        app.register_blueprint(views_bp)

    register_error_handlers(app)

    if app.config.get('CORS_ALLOW_ALL') is None:
        app.config['CORS_ALLOW_ALL'] = app.config['ENABLE_HTML_VIEWS']
    if app.config['CORS_ALLOW_ALL']:
        _enable_permissive_cors(app)

    logger.info(
        f"userhub ready: database={database.path} "
        f"html_views={app.config['ENABLE_HTML_VIEWS']} cors_allow_all={app.config['CORS_ALLOW_ALL']}"
    )
    return app


def _enable_permissive_cors(app):
    """Allow any origin, method and header on every response."""

    @app.after_request
    def add_cors_headers(response):
        for header, value in CORS_HEADERS.items():
            response.headers.setdefault(header, value)
        return response
