# Gunicorn Configuration for the SCORM RTE player
# All configuration is read from environment variables
# Several workers need REDIS_URL set so player handles are shared

import multiprocessing
import os

DJANGO_ENV = os.environ.get('DJANGO_ENV', 'production')

LOGS_DIR = os.environ.get('LOGS_DIR', 'logs')
GUNICORN_BIND = os.environ.get('GUNICORN_BIND', '0.0.0.0:8000')
GUNICORN_TIMEOUT = int(os.environ.get('GUNICORN_TIMEOUT', '30'))

workers_env = os.environ.get('GUNICORN_WORKERS', 'auto')
if workers_env == 'auto':
    # A single worker keeps the local-memory cache coherent
    workers = multiprocessing.cpu_count() * 2 + 1 if os.environ.get('REDIS_URL') else 1
else:
    workers = int(workers_env)

# Server socket
bind = GUNICORN_BIND
backlog = 2048

worker_class = "sync"
timeout = GUNICORN_TIMEOUT
keepalive = 5

max_requests = 1000
max_requests_jitter = 100

accesslog = f"{LOGS_DIR}/gunicorn_access.log"
errorlog = f"{LOGS_DIR}/gunicorn_error.log"
loglevel = "warning"

proc_name = f"scorm-rte-{DJANGO_ENV}"

daemon = False
graceful_timeout = 30

raw_env = [
    'DJANGO_SETTINGS_MODULE=RTE_Project.settings',
    f'DJANGO_ENV={DJANGO_ENV}',
]

wsgi_app = "RTE_Project.wsgi:application"


def when_ready(server):
    """Called just after the server is started."""
    server.log.info(f"SCORM RTE {DJANGO_ENV.upper()} server started with {server.cfg.workers} worker(s)")
    server.log.info(f"Binding to: {server.cfg.bind}")


def on_exit(server):
    """Called just before exiting."""
    server.log.info(f"SCORM RTE {DJANGO_ENV.upper()} server shutting down")
