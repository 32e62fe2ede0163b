"""
Logging setup for deploy-summary

Diagnostics go to stderr and, optionally, a log file. stdout carries
nothing but the report.
"""

import logging
import sys
from pathlib import Path


def setup_logging(log_level: str = "WARNING", log_file: str = None):
    """Configure diagnostic logging.

    Console output goes to stderr; stdout is reserved for the report.
    """

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
