import os
import sys

# Add src directory to Python path so 'legal_insight' package can be found
sys.path.append(os.path.join(os.getcwd(), 'src'))

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The engine is pure CPU work over small strings; a few threads per worker is plenty.
workers = int(os.environ.get('GUNICORN_WORKERS', '2'))
threads = int(os.environ.get('GUNICORN_THREADS', '4'))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

preload_app = True
accesslog = "-"
errorlog = "-"
loglevel = "info"
timeout = 30
