"""
Logging Configuration
Sets up the file logger for the application.
"""
import logging
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the root logger that every module logger propagates to.

    Only a file handler is attached: stdout is owned by the curses screen
    while the viewer runs.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to append logs to. Without it logging stays silent.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on re-entry
    if logger.hasHandlers():
        logger.handlers.clear()

    if not log_file:
        logger.addHandler(logging.NullHandler())
        return logger

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
