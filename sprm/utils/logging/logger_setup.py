"""Module: logger_setup.py

Date: 2026-10-18

This module provides the ConfigureLogger class for setting up logging in sprm.
Records from every sprm module flow to the "sprm" package logger. A stderr
console handler shows LOG_CONSOLE_LEVEL and higher; an optional rotating file
handler receives DEBUG and higher when a log file path is given.
"""

import contextlib
import logging
import sys

from sprm.config import APP_NAME, LOG_CONSOLE_FORMAT, LOG_CONSOLE_LEVEL, LOG_FILE_LEVEL
from sprm.utils.logging.logger_file_helper import add_file_handler
from sprm.utils.logging.logger_helper import DevOnlyFilter

# Marks handlers we own so a second ConfigureLogger() replaces them
_HANDLER_MARKER = "_sprm_handler"


class ConfigureLogger:
    """
    Configures logging for one sprm invocation.
    Console output goes to stderr so it never mixes with prompts or verbose lines.
    """

    def __init__(
        self,
        log_name: str = APP_NAME,
        console_level: int | str = LOG_CONSOLE_LEVEL,
        log_file: str | None = None,
        file_level: int | str = LOG_FILE_LEVEL,
        stream=None,
    ):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Name of the logger to configure.
            console_level (int | str): Level for the console handler.
            log_file (str, optional): Path of a rotating log file.
            file_level (int | str): Level for the log file.
            stream: Console stream, defaults to sys.stderr.
        """
        self.logger = logging.getLogger(log_name)
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self._remove_owned_handlers()

        self._setup_console_handler(_to_level(console_level), stream or sys.stderr)

        if log_file:
            handler = add_file_handler(
                logger=self.logger,
                log_path=log_file,
                level=_to_level(file_level),
            )
            setattr(handler, _HANDLER_MARKER, True)

    def _remove_owned_handlers(self) -> None:
        for handler in list(self.logger.handlers):
            if getattr(handler, _HANDLER_MARKER, False):
                self.logger.removeHandler(handler)
                handler.close()

    def _setup_console_handler(self, level: int, stream) -> None:
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(stream)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(errors="backslashreplace")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
        setattr(console_handler, _HANDLER_MARKER, True)
        self.logger.addHandler(console_handler)


def _to_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)
