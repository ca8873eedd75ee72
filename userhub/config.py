"""
Application configuration.
"""
import os

from dotenv import load_dotenv
load_dotenv()


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Server socket
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # Storage: single SQLite file, created on startup if missing
    DATABASE_PATH = os.environ.get('DATABASE_PATH', 'db.db')
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 5))
    DB_POOL_TIMEOUT = float(os.environ.get('DB_POOL_TIMEOUT', 5))

    # Server-rendered views for htmx clients
    ENABLE_HTML_VIEWS = _env_flag('ENABLE_HTML_VIEWS', True)

    # Any-origin CORS. None means "same as ENABLE_HTML_VIEWS", resolved in create_app
    CORS_ALLOW_ALL = _env_flag('CORS_ALLOW_ALL', None)
