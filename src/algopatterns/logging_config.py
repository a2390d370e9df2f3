"""
Logging Configuration
Sets up the global logger for the package.
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "ALGOPATTERNS_LOG_LEVEL"


def resolve_level(level: Optional[int] = None) -> int:
    """
    Pick the logging level: explicit argument first, then the environment.

    Args:
        level: Explicit level, wins over the environment when given.

    Raises:
        ValueError: If the environment names an unknown level.

    Returns:
        A numeric logging level.
    """
    if level is not None:
        return level

    env_value = os.environ.get(LOG_LEVEL_ENV)
    if not env_value:
        return logging.INFO

    resolved = logging.getLevelName(env_value.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: '{env_value}'.")
    return resolved


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'algopatterns' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). Falls back to
            the ALGOPATTERNS_LOG_LEVEL environment variable, then INFO.
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)

    # Get the logger for our package
    logger = logging.getLogger("algopatterns")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on repeated runs
    if logger.hasHandlers():
        logger.handlers.clear()

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
