"""Constants module for the cloudctl dashboard.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Layout and threshold values
- defaults.py: Default values for settings
"""

from cloudctl.constants.defaults import (
    API_URL_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from cloudctl.constants.enums import (
    ApiHealthStatus,
    ClusterConditionType,
    ClusterOperationState,
    ConditionStatus,
    ProtectionState,
    ServerState,
    StorageClusterHealth,
    ThemeName,
    VolumeState,
)
from cloudctl.constants.limits import (
    FILTER_HEADER_WIDTH,
    HEADER_HEIGHT,
    TAB_STRIP_HEIGHT,
)
from cloudctl.constants.timeouts import (
    DASHBOARD_REQUEST_TIMEOUT,
)
from cloudctl.constants.values import (
    APP_TITLE,
    GLOSSARY_LINE,
    STATUS_UNKNOWN,
)

__all__ = [
    # Defaults
    "API_URL_DEFAULT",
    # Application
    "APP_TITLE",
    # Timeouts
    "DASHBOARD_REQUEST_TIMEOUT",
    # Layout
    "FILTER_HEADER_WIDTH",
    "GLOSSARY_LINE",
    "HEADER_HEIGHT",
    "REFRESH_INTERVAL_DEFAULT",
    "STATUS_UNKNOWN",
    "TAB_STRIP_HEIGHT",
    "THEME_DEFAULT",
    # Enums
    "ApiHealthStatus",
    "ClusterConditionType",
    "ClusterOperationState",
    "ConditionStatus",
    "ProtectionState",
    "ServerState",
    "StorageClusterHealth",
    "ThemeName",
    "VolumeState",
]
