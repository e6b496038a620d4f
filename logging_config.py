"""
Logging setup for ProteinMaster.

Call `setup_logging()` once from the entry point; modules then use
`get_logger(__name__)`. Context goes into the message as key=value pairs:

    logger = get_logger(__name__)
    log_with_context(logger, "warning", "Quiz fallback used", topic="Proteins")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "openai")


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA,
    }

    def format(self, record):
        # Colour a copy; other handlers share the original record
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, "")
        colored.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(colored)


def _console_handler(level):
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_dir, level):
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / f"proteinmaster_{datetime.now().strftime('%Y%m%d')}.log"
    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level="INFO", log_dir=None):
    """
    Configure the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: If set, also append to a dated file in this directory

    Returns:
        logging.Logger: the root logger
    """
    just_fix_windows_console()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [_console_handler(level)]
    if log_dir:
        root_logger.addHandler(_file_handler(log_dir, level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info(f"Logging initialized at level {level}")
    if log_dir:
        root_logger.info(f"Log directory: {log_dir}")
    return root_logger


def get_logger(name):
    return logging.getLogger(name)


def log_with_context(logger, level, message, **context):
    """
    Log `message` followed by ` | key=value` for each context item.

    Args:
        logger: Logger instance
        level: Method name on the logger (debug, info, warning, error, critical)
        message: Log message
        **context: Extra fields appended to the message
    """
    if context:
        message += " | " + " | ".join(f"{k}={v}" for k, v in context.items())
    getattr(logger, level)(message)
