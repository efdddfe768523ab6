"""Data models for the cloudctl dashboard."""

from cloudctl.models.config import (
    ConfigError,
    DashboardConfig,
    FilterContext,
)
from cloudctl.models.contexts import Context, Contexts
from cloudctl.models.records import (
    ClusterCondition,
    ClusterLastError,
    ClusterRecord,
    HealthReport,
    StorageClusterRecord,
    StorageServer,
    VolumeRecord,
)
from cloudctl.models.summaries import (
    ClusterHealthSummary,
    ProblemRecord,
    StorageHealthSummary,
    VolumeHealthSummary,
)

__all__ = [
    "ClusterCondition",
    "ClusterHealthSummary",
    "ClusterLastError",
    "ClusterRecord",
    "ConfigError",
    "Context",
    "Contexts",
    "DashboardConfig",
    "FilterContext",
    "HealthReport",
    "ProblemRecord",
    "StorageClusterRecord",
    "StorageHealthSummary",
    "StorageServer",
    "VolumeHealthSummary",
    "VolumeRecord",
]
