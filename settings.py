import logging
import os
import sys

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_MENU = os.getenv("DEFAULT_MENU", "main")
FRONTEND_ORIGINS = [
    origin.strip()
    for origin in os.getenv("FRONTEND_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

_indent = os.getenv("MENU_JSON_INDENT")
MENU_JSON_INDENT = int(_indent) if _indent else None


def _build_logger(name: str) -> logging.Logger:
    """Create the application logger with a single stream handler."""
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        ))
        log.addHandler(handler)
    log.setLevel(LOG_LEVEL)
    return log


logger = _build_logger("menu_hub")
