import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get or create a console logger.

    Usage:
        from utility.logging_config import setup_logger
        logger = setup_logger(__name__)
    """
    logger = logging.getLogger(name or "translator")

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    # Unknown names fall back to INFO
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    return logger
