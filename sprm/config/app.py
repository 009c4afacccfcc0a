"""Module: sprm.config.app

Date: 2026-10-18

Application-level configuration: app info, exit codes, prompt and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "sprm"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Remove spaces and other characters from FILE name(s)"

# =====================================
# EXIT CODES
# =====================================

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FILE_ERRORS = 2  # only with --strict

# =====================================
# NAMING
# =====================================

DASH_SEPARATOR = "-"
UNDERSCORE_SEPARATOR = "_"

# =====================================
# INTERACTIVE PROMPT
# =====================================

# An answer is affirmative iff its first character matches (case-insensitive)
AFFIRMATIVE_PREFIX = "y"
PROMPT_TEMPLATE = "{app}: {verb} '{src}' to '{dst}'? (y/n): "

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# Console logging (stderr); per-file failures are printed as "Error: ..." already
LOG_CONSOLE_LEVEL = "ERROR"

# File logging, only when --log-file is given
LOG_FILE_LEVEL = "DEBUG"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
