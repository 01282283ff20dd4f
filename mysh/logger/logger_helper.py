"""
Logging setup for the shell, backed by loguru.

Everything logged through python's `logging` module ends up in a rotated
debug log file. Records at the console level (ERROR unless told otherwise)
are also echoed to stderr: stdout belongs to the commands the shell runs.
"""

import logging
import sys
from pathlib import Path

import loguru

from mysh import config
from mysh.logger import logging_interceptor

logger = loguru.logger


LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def level_filter(minimum):
    """
    Filter function to keep records below `minimum` off the console.
    """
    no = logger.level(minimum).no

    def is_level(record):
        return record["level"].no >= no
    return is_level


def configure(level="ERROR", log_dir=None, console=True):
    logger.remove()

    logs_dir = Path(log_dir or config.LOG_DIR)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # the shell still runs, it just keeps no debug log
        unwritable, logs_dir = e, None

    if logs_dir is not None:
        # init rotated log file
        logger.add(
            logs_dir / "debug.log",
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
            backtrace=True,
            colorize=False,
            catch=True,
            delay=True,
            diagnose=True,
        )

    if console:
        logger.add(sys.stderr, colorize=True, level="DEBUG", filter=level_filter(level.upper()))

    if logs_dir is None:
        logger.warning("not writing a debug log, {}", unwritable)

    logging_interceptor.install(logging.DEBUG)
    return logger
