"""
Logging Configuration
Routes the 'epicycles.*' loggers to the console and, on request, to a file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the package logger.

    Views log mounts and mode switches at INFO. Engines and the scheduler
    log creation, resizes, start/stop and skipped ticks at DEBUG.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Also write the records to this path (truncated on start).
    """
    logger = logging.getLogger("epicycles")
    logger.setLevel(level)

    # Calling this twice (tests, a relaunch from the same interpreter) must not double every record
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")


def parse_level(name: str) -> int:
    """Map a level name ('debug', 'INFO', ...) to its logging constant, INFO if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
