"""
Gunicorn configuration for LiftLog production deployment.

Usage:
    gunicorn liftlog.main:app -c gunicorn.conf.py
"""

import multiprocessing
import os

# Bind to all interfaces on PORT (default 4000)
bind = f"0.0.0.0:{os.getenv('PORT', '4000')}"

# Worker processes: CPU cores * 2 + 1 (Gunicorn recommendation)
workers = multiprocessing.cpu_count() * 2 + 1

# Use Uvicorn's ASGI worker for FastAPI
worker_class = "uvicorn.workers.UvicornWorker"

# Request timeout (seconds)
timeout = 30

# Keep-alive connections (seconds)
keepalive = 5

# Logging
accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = "info"
