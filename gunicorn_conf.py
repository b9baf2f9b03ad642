import os

# The relay is stateless and I/O bound, a few async workers are enough
bind = os.getenv("BIND", f"0.0.0.0:{os.getenv('PORT', '8080')}")
workers = int(os.getenv("WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"

# One Telegram call per request, bounded by TELEGRAM_TIMEOUT
timeout = int(os.getenv("TIMEOUT", 30))

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
preload_app = True
