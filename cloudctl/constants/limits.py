"""Layout and threshold constants for the dashboard."""

from typing import Final

# ============================================================================
# Dashboard layout (terminal cells)
# ============================================================================

HEADER_HEIGHT: Final = 5
TAB_STRIP_HEIGHT: Final = 1
FILTER_HEADER_WIDTH: Final = 25

# ============================================================================
# Gauge thresholds (percent)
# ============================================================================

PERCENT_MIN: Final = 0
PERCENT_MAX: Final = 100
PHYSICAL_FREE_CRITICAL: Final = 10
PHYSICAL_FREE_WARNING: Final = 30

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 0.1
MAX_TABS: Final = 9

__all__ = [
    "FILTER_HEADER_WIDTH",
    "HEADER_HEIGHT",
    "MAX_TABS",
    "PERCENT_MAX",
    "PERCENT_MIN",
    "PHYSICAL_FREE_CRITICAL",
    "PHYSICAL_FREE_WARNING",
    "REFRESH_INTERVAL_MIN",
    "TAB_STRIP_HEIGHT",
]
