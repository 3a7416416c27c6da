"""
Logging Configuration
Sets up the logger of the 'drugdiffusion' package for the CLI and Qt hosts.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "drugdiffusion"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'drugdiffusion' logger.

    Args:
        level: Logging level, either a number (logging.DEBUG) or a name ("DEBUG")
            as passed on the command line.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling again (e.g. repeated CLI runs in one process) replaces the handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

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

    logger.info(
        f"Logging initialized at {logging.getLevelName(level)}"
        + (f", writing to {log_file}." if log_file else ".")
    )
    return logger
