import logging
from typing import Dict, Optional

import colorlog

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}


def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()
    logger = logging.getLogger(name)

    if log_level in LOG_LEVELS:
        logger.setLevel(LOG_LEVELS[log_level])
    else:
        logger.setLevel(logging.INFO)
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVELS.get(log_level, logging.INFO))

    formatter = colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    CONFIGURED_LOGGERS[name] = logger
    return logger


def get_log_level() -> str:
    """Get the log level from the logging config section (``LOG_LEVEL``)."""
    # Imported here: yt_scribe.core modules create their loggers at import time
    from ..core.config import config
    return (config.logging.level or "INFO").upper()


def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the specified name and log level.

    Loggers are namespaced under ``yt_scribe`` and configured once; later calls
    with the same name return the already configured instance.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    full_name = name if name.startswith("yt_scribe") else f"yt_scribe.{name}"
    if log_level is None and full_name in CONFIGURED_LOGGERS:
        return CONFIGURED_LOGGERS[full_name]
    if log_level is None:
        log_level = get_log_level()
    return setup_logger(full_name, log_level)
