"""
Logging Configuration
Sets up the logger for the geo demo.
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "GEO_LOG_LEVEL"


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by GEO_LOG_LEVEL, or ``default`` if unset or unknown."""
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'geo' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("geo")
    logger.setLevel(level)

    # Avoid duplicate output when the demo is run more than once in a process
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # Diagnostics go to stderr, stdout is reserved for results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter = logging.Formatter("%(message)s")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
