"""
Gunicorn configuration for production deployment.

    gunicorn -c gunicorn.conf.py wsgi:app
"""
import os

# Server socket
PORT = int(os.environ.get("PORT", 3000))
bind = f"0.0.0.0:{PORT}"
backlog = 2048

# Worker processes
# Threads block on SQLite I/O, so each worker serves requests from a thread pool.
# Each worker process owns its own connection pool (DB_POOL_SIZE connections).
workers = int(os.environ.get("WEB_CONCURRENCY", 1))
worker_class = "gthread"
threads = int(os.environ.get("GUNICORN_THREADS", 8))
timeout = 30
keepalive = 2
graceful_timeout = 30

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

# Process naming
proc_name = "userhub"


def worker_int(worker):
    """Called when a worker receives INT or QUIT signal."""
    import logging
    logging.warning(f"Worker {worker.pid} received INT/QUIT signal")


def worker_exit(server, worker):
    """Release pooled database connections when a worker stops."""
    import sys
    wsgi_module = sys.modules.get("wsgi")
    app = getattr(wsgi_module, "app", None)
    if app is not None:
        app.extensions["userhub.database"].dispose()
