"""Module: logger_helper.py

Date: 2026-10-18

Helpers that keep log output safe for any console encoding.

Functions:
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message, retrying with ASCII-safe text.
get_logger(name): Returns a named logger whose methods are wrapped with safe_log.
DevOnlyFilter:
Hides records logged with extra={"dev_only": True} from the console handler,
while file handlers still receive them.
"""

import logging
import re
from functools import partial

from sprm.config import SHOW_DEV_ONLY_IN_CONSOLE

# Filenames are the main payload of our log lines and they can hold anything
_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS)))


def safe_text(text: str) -> str:
    """
    Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text.

    Returns:
        str: The text with known symbols replaced and anything else
        that is not ASCII escaped.
    """
    replaced = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return replaced.encode("ascii", "backslashreplace").decode("ascii")


def safe_log(logger_func, message, *args, **kwargs):
    """
    Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.
    """
    if not isinstance(message, str):
        message = repr(message)
    try:
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        safe_args = tuple(safe_text(a) if isinstance(a, str) else a for a in args)
        logger_func(safe_text(message), *safe_args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replaces the logger's level methods with safe_log-wrapped versions."""
    for method_name in ("debug", "info", "warning", "error", "critical", "exception"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger with the given name that delegates output to the
    package logger configured by ConfigureLogger.

    Args:
        name (str): Logger name, usually the caller's __name__.

    Returns:
        logging.Logger: Patched logger instance
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # Handlers live on the "sprm" logger only
    logger.propagate = True
    if logger.handlers:
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
