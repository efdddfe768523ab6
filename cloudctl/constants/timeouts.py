"""Timeout constants for the dashboard.

All timeout values for API requests issued by a render cycle.
"""

from typing import Final

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

# Deadline applied to every outbound call of a single render cycle.
DASHBOARD_REQUEST_TIMEOUT: Final = 5.0

# Transport-level connect timeout, kept below the request deadline.
HTTP_CONNECT_TIMEOUT: Final = 3.0

__all__ = [
    "DASHBOARD_REQUEST_TIMEOUT",
    "HTTP_CONNECT_TIMEOUT",
]
