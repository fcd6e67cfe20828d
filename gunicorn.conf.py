# ============================================
# Gestion Clinique - Configuration Gunicorn
# gunicorn -c gunicorn.conf.py api.index:app
# ============================================
import os
import multiprocessing

# --- Server ---
bind = f"{os.getenv('GESTION_CLINIQUE_HOST', '0.0.0.0')}:{os.getenv('GESTION_CLINIQUE_PORT', '8000')}"
workers = int(os.getenv("GESTION_CLINIQUE_WORKERS", min(multiprocessing.cpu_count() * 2 + 1, 4)))
worker_class = "uvicorn.workers.UvicornWorker"

# --- Timeouts ---
timeout = 30
graceful_timeout = 30
keepalive = 5

# --- Memory ---
max_requests = 1000
max_requests_jitter = 50

# --- Logging ---
accesslog = os.getenv("GESTION_CLINIQUE_ACCESS_LOG", "-")
errorlog = os.getenv("GESTION_CLINIQUE_ERROR_LOG", "-")
loglevel = os.getenv("GESTION_CLINIQUE_LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)sms'

# --- Process ---
# Les workers partagent le meme fichier d'options, serialise par flock sur options.lock.
preload_app = True
daemon = False


# --- Hooks ---
def on_starting(server):
    server.log.info("Gestion Clinique starting...")


def when_ready(server):
    server.log.info(f"Gestion Clinique ready with {workers} workers on {bind}")


def worker_exit(server, worker):
    server.log.info(f"Worker {worker.pid} exiting")
