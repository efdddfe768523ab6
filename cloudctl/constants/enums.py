"""All enum definitions for the dashboard.

This module consolidates the state vocabularies reported by the cloud API and
used to classify records into histogram buckets.
"""

from enum import Enum

# =============================================================================
# Cluster Enums
# =============================================================================


class ClusterOperationState(Enum):
    """Last-operation states of a cluster (shoot)."""

    SUCCEEDED = "Succeeded"
    PROCESSING = "Processing"
    PENDING = "Pending"
    ERROR = "Error"
    FAILED = "Failed"
    ABORTED = "Aborted"


class ConditionStatus(Enum):
    """Status values of a cluster condition."""

    TRUE = "True"
    FALSE = "False"
    PROGRESSING = "Progressing"
    UNKNOWN = "Unknown"


class ClusterConditionType(Enum):
    """Condition types counted by the cluster pane gauges."""

    API_SERVER_AVAILABLE = "APIServerAvailable"
    CONTROL_PLANE_HEALTHY = "ControlPlaneHealthy"
    EVERY_NODE_READY = "EveryNodeReady"
    SYSTEM_COMPONENTS_HEALTHY = "SystemComponentsHealthy"


# =============================================================================
# Volume / Storage Enums
# =============================================================================


class VolumeState(Enum):
    """Volume states reported by the storage backend."""

    AVAILABLE = "Available"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class ProtectionState(Enum):
    """Volume protection states."""

    FULLY_PROTECTED = "FullyProtected"
    DEGRADED = "Degraded"
    READ_ONLY = "ReadOnly"
    NOT_AVAILABLE = "NotAvailable"
    UNKNOWN = "Unknown"


class StorageClusterHealth(Enum):
    """Storage cluster health states."""

    OK = "OK"
    WARNING = "Warning"
    ERROR = "Error"
    NONE = "None"


class ServerState(Enum):
    """Storage server states."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"
    FAILED = "Failed"


# =============================================================================
# API Health Enums
# =============================================================================


class ApiHealthStatus(Enum):
    """Health status values reported by the API health endpoint."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    PARTIALLY_UNHEALTHY = "partial-unhealthy"
    UNHEALTHY = "unhealthy"


# =============================================================================
# Theme Enums
# =============================================================================


class ThemeName(Enum):
    """Dashboard color themes."""

    DEFAULT = "default"
    DARK = "dark"


__all__ = [
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
