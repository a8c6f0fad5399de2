"""
Log sink setup. One file per run, truncated, named after the plugin.
"""

import logging
import os
from typing import Optional

from .config import PLUGIN_NAME, LOG_FORMAT, LOG_DATE_FORMAT, DEFAULT_LOG_DIR


def setup_logging(log_dir: Optional[str] = None, level: int = logging.DEBUG,
                  console: bool = True) -> str:
    """Attach file (and console) handlers to the package logger. Safe to call twice."""
    log_dir = log_dir or DEFAULT_LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.abspath(os.path.join(log_dir, f"{PLUGIN_NAME}.log"))

    package_logger = logging.getLogger("gambit")
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    has_file = any(
        isinstance(handler, logging.FileHandler)
        and os.path.abspath(handler.baseFilename) == log_file
        for handler in package_logger.handlers
    )
    if not has_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    has_stream = any(
        type(handler) is logging.StreamHandler for handler in package_logger.handlers
    )
    if console and not has_stream:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        package_logger.addHandler(stream_handler)

    package_logger.setLevel(level)
    return log_file
