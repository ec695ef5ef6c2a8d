"""
Configuration constants for ppwd.

This module centralizes all hardcoded values to make the application
easier to maintain and configure.
"""

import os


def _platform_path_max() -> int:
    """Return the platform's maximum path length (PATH_MAX)."""
    try:
        value = os.pathconf("/", "PC_PATH_MAX")
    except (AttributeError, OSError, ValueError):
        # os.pathconf is missing on Windows
        return FALLBACK_PATH_MAX
    if value is None or value <= 0:
        return FALLBACK_PATH_MAX
    return value


# Path length limits
FALLBACK_PATH_MAX = 4096  # Linux PATH_MAX
MAX_PATH_LENGTH = _platform_path_max()

# Target length used when no length argument is given ("never compress")
DEFAULT_TARGET_LENGTH = MAX_PATH_LENGTH + 2

# Display markers
HOME_MARKER = "~"
PATH_SEPARATOR = "/"

# Environment variables
HOME_ENV_VAR = "HOME"
PWD_ENV_VAR = "PWD"

# Settings storage
APP_NAME = "ppwd"
SETTINGS_FILE_NAME = "settings.json"

# Percentage lengths are relative to the terminal width
PERCENT_SUFFIX = "%"
FALLBACK_TERMINAL_COLUMNS = 80

# Exit codes
EXIT_OK = 0
EXIT_ENVIRONMENT_ERROR = 1
EXIT_USAGE_ERROR = 2

# Log record format for --verbose
LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"
