"""
Logging Configuration
Sets up the 'barinventory' logger for the application.

The console shows messages at the configured level. When a log file is given it
always records DEBUG, so the per-list add/update/remove trail of the
synchronizers is on disk even when the console is quiet.
"""
import logging
import sys
from typing import Optional, Union

from barinventory import config

PACKAGE_LOGGER = "barinventory"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None]) -> int:
    """Accept a level number or name ('debug', 'WARNING'); None means config.LOG_LEVEL."""
    if level is None:
        return config.LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = getattr(logging, level.strip().upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configures the 'barinventory' namespace logger.

    Args:
        level: Console level as number or name. Defaults to config.LOG_LEVEL.
        log_file: Optional path for a DEBUG log. Defaults to config.LOG_FILE.

    Returns:
        The configured package logger.
    """
    console_level = resolve_level(level)
    if log_file is None:
        log_file = config.LOG_FILE

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(min(console_level, logging.DEBUG) if log_file else console_level)

    # Repeated setup replaces the handlers instead of stacking them
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    logger.info(
        f"Logging initialized (console: {logging.getLevelName(console_level)}, "
        f"file: {log_file or 'none'})."
    )
    return logger
