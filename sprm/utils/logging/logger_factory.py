"""Module: logger_factory.py

Date: 2026-10-18

Logger factory with caching.
Keeps a single patched logger per module name behind a lock.
"""

import inspect
import logging
import threading

from sprm.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """
    Thread-safe logger factory with caching.

    get_logger() only builds and patches a logger the first time a name is seen.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance
        """
        if name is None:
            # Two frames up: past get_cached_logger() to its caller
            frame = inspect.currentframe()
            caller = frame.f_back.f_back if frame and frame.f_back else None
            name = caller.f_globals.get("__name__", "sprm") if caller else "sprm"

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)

            return cls._loggers[name]


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """
    Convenience function for getting cached logger.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Cached logger instance
    """
    return LoggerFactory.get_logger(name)
