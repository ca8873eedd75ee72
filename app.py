"""
Development entry point.
"""
import logging
import sys

from userhub import create_app
from userhub.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

app = create_app()


if __name__ == '__main__':
    # For development
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)
