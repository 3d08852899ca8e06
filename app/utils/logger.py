# app/utils/logger.py
import logging
import sys
from app.utils.config import settings

# Get the logger instance for our application.
logger = logging.getLogger("news_quiz")

def resolve_log_level(name: str) -> int:
    """Maps a level name to its numeric value, defaulting to INFO if the name is invalid."""
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO

logger.setLevel(resolve_log_level(settings.log_level))

# Clear any existing handlers to prevent duplicate logs during hot-reloads.
if logger.hasHandlers():
    logger.handlers.clear()

handler = logging.StreamHandler(sys.stdout)
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)

# Prevent log messages from being passed to the root logger to avoid double printing.
logger.propagate = False
