"""
Production entry point: ``gunicorn -c gunicorn.conf.py wsgi:app``.
"""
import sys
import logging

from userhub.config import Config
from userhub.errors import StorageInitError

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)

try:
    from userhub import create_app
    app = create_app()
except StorageInitError as e:
    logger.critical(f"userhub not started, database {Config.DATABASE_PATH} is unusable: {e}")
    raise
except Exception:
    logger.critical("userhub not started, application factory failed", exc_info=True)
    raise


if __name__ == "__main__":
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)
