"""Default values for settings.

All default values used in the DashboardConfig model and the CLI options.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "default"
REFRESH_INTERVAL_DEFAULT: Final = 3.0

# ============================================================================
# API defaults
# ============================================================================

API_URL_DEFAULT: Final = "http://localhost:8080/cloud"
CONFIG_FILE_NAME: Final = "config.yaml"
CONFIG_SEARCH_DIRS: Final[tuple[str, ...]] = (
    ".",
    "~/.cloudctl",
    "/etc/cloudctl",
)

__all__ = [
    "API_URL_DEFAULT",
    "CONFIG_FILE_NAME",
    "CONFIG_SEARCH_DIRS",
    "REFRESH_INTERVAL_DEFAULT",
    "THEME_DEFAULT",
]
