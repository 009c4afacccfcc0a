"""Module: sprm.config

Date: 2026-10-18

Configuration package for sprm.

Settings are grouped in submodules and re-exported here:
    from sprm.config import APP_NAME, LOG_CONSOLE_LEVEL
"""

from sprm.config.app import *  # noqa: F401, F403
