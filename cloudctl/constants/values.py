"""Scalar constants for the dashboard.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Cloud Dashboard"
CLI_NAME: Final = "cloudctl"

# ============================================================================
# Header texts
# ============================================================================

STATUS_UNKNOWN: Final = "unknown"
FILTER_HEADER_TITLE: Final = "Filters"
GLOSSARY_LINE: Final = "Switch between tabs with number keys. Press q to quit."
LAST_UPDATE_FORMAT: Final = "%H:%M:%S"

# ============================================================================
# Environment variables
# ============================================================================

ENV_API_URL: Final = "CLOUDCTL_URL"
ENV_API_TOKEN: Final = "CLOUDCTL_APITOKEN"

__all__ = [
    "APP_TITLE",
    "CLI_NAME",
    "ENV_API_TOKEN",
    "ENV_API_URL",
    "FILTER_HEADER_TITLE",
    "GLOSSARY_LINE",
    "LAST_UPDATE_FORMAT",
    "STATUS_UNKNOWN",
]
