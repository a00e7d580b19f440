"""
Logging configuration module.

This module provides centralized logging setup for host applications
embedding the formatting utilities, configuring console output and an
optional log file with a shared format.
"""

import logging
from config.settings import Settings


def setup_logger() -> None:
    """
    Configure and initialize the application logger.

    Sets up console logging and, when Settings.LOG_FILE is configured,
    file logging as well. The level comes from Settings.LOG_LEVEL.

    The function configures:
        - Console logging to stderr
        - File logging to <LOGS_DIR>/formatting.log with UTF-8 encoding (optional)
        - Custom formatter with timestamp, logger name, level, and message
        - Reduced verbosity for babel

    Args:
        None

    Returns:
        None

    Raises:
        OSError: If the logs directory cannot be created (rare, usually permissions issue)

    Example:
        >>> setup_logger()
        >>> logging.info("Formatter ready")
        2025-11-11 14:30:00 - root - INFO - Formatter ready

    Note:
        - Existing handlers are cleared before setup to avoid duplicates
        - The formatting functions never call this themselves
    """
    level = logging.getLevelName(Settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    # Create formatter with timestamp, logger name, level, and message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    # Handler for file output (UTF-8 encoding for CJK notices)
    if Settings.LOG_FILE is not None:
        Settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    # Reduce verbosity of third-party libraries to avoid log spam
    logging.getLogger('babel').setLevel(logging.WARNING)
