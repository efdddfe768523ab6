"""API record models.

Every field is optional: the classification code must cope with records that
lack any of them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_RECORD_CONFIG = ConfigDict(populate_by_name=True, extra="ignore")

# =============================================================================
# Clusters
# =============================================================================


class ClusterCondition(BaseModel):
    """A health condition of a cluster."""

    model_config = _RECORD_CONFIG

    type: str | None = None
    status: str | None = None
    message: str | None = None
    last_update_time: str | None = Field(default=None, alias="lastUpdateTime")


class ClusterLastError(BaseModel):
    """An error reported by the last cluster reconciliation."""

    model_config = _RECORD_CONFIG

    description: str | None = None
    last_update_time: str | None = Field(default=None, alias="lastUpdateTime")


class ClusterLastOperation(BaseModel):
    """The most recent operation applied to a cluster."""

    model_config = _RECORD_CONFIG

    state: str | None = None
    type: str | None = None
    progress: int | None = None


class ClusterStatus(BaseModel):
    """Status block of a cluster."""

    model_config = _RECORD_CONFIG

    last_operation: ClusterLastOperation | None = Field(default=None, alias="lastOperation")
    conditions: list[ClusterCondition | None] = []
    last_errors: list[ClusterLastError | None] = Field(default=[], alias="lastErrors")


class ClusterRecord(BaseModel):
    """A cluster as returned by the cluster find endpoint."""

    model_config = _RECORD_CONFIG

    id: str | None = Field(default=None, alias="ID")
    name: str | None = Field(default=None, alias="Name")
    tenant: str | None = Field(default=None, alias="Tenant")
    partition_id: str | None = Field(default=None, alias="PartitionID")
    purpose: str | None = Field(default=None, alias="Purpose")
    status: ClusterStatus | None = Field(default=None, alias="Status")

    @property
    def operation_state(self) -> str | None:
        """Return the last operation state, or None when not reported."""
        if self.status is None or self.status.last_operation is None:
            return None
        return self.status.last_operation.state


# =============================================================================
# Volumes
# =============================================================================


class VolumeStatistics(BaseModel):
    """Usage statistics of a volume."""

    model_config = _RECORD_CONFIG

    physical_used_storage: int | None = Field(default=None, alias="PhysicalUsedStorage")
    logical_used_storage: int | None = Field(default=None, alias="LogicalUsedStorage")


class VolumeRecord(BaseModel):
    """A volume as returned by the volume find endpoint."""

    model_config = _RECORD_CONFIG

    volume_id: str | None = Field(default=None, alias="VolumeID")
    volume_name: str | None = Field(default=None, alias="VolumeName")
    tenant_id: str | None = Field(default=None, alias="TenantID")
    partition_id: str | None = Field(default=None, alias="PartitionID")
    state: str | None = Field(default=None, alias="State")
    protection_state: str | None = Field(default=None, alias="ProtectionState")
    statistics: VolumeStatistics | None = Field(default=None, alias="Statistics")


# =============================================================================
# Storage clusters
# =============================================================================


class StorageClusterHealthInfo(BaseModel):
    """Health block of a storage cluster."""

    model_config = _RECORD_CONFIG

    state: str | None = Field(default=None, alias="State")


class StorageServer(BaseModel):
    """A server belonging to a storage cluster."""

    model_config = _RECORD_CONFIG

    name: str | None = Field(default=None, alias="Name")
    state: str | None = Field(default=None, alias="State")


class StorageClusterStatistics(BaseModel):
    """Capacity statistics of a storage cluster."""

    model_config = _RECORD_CONFIG

    free_physical_storage: int | None = Field(default=None, alias="FreePhysicalStorage")
    physical_used_storage: int | None = Field(default=None, alias="PhysicalUsedStorage")
    compression_ratio: float | None = Field(default=None, alias="CompressionRatio")


class StorageClusterRecord(BaseModel):
    """Storage cluster information, visible to provider admins only."""

    model_config = _RECORD_CONFIG

    uuid: str | None = Field(default=None, alias="UUID")
    partition: str | None = Field(default=None, alias="Partition")
    health: StorageClusterHealthInfo | None = Field(default=None, alias="Health")
    servers: list[StorageServer | None] = Field(default=[], alias="Servers")
    statistics: StorageClusterStatistics | None = Field(default=None, alias="Statistics")


# =============================================================================
# API status
# =============================================================================


class HealthReport(BaseModel):
    """Payload of the API health endpoint."""

    model_config = _RECORD_CONFIG

    status: str = ""
    message: str = ""


__all__ = [
    "ClusterCondition",
    "ClusterLastError",
    "ClusterLastOperation",
    "ClusterRecord",
    "ClusterStatus",
    "HealthReport",
    "StorageClusterHealthInfo",
    "StorageClusterRecord",
    "StorageClusterStatistics",
    "StorageServer",
    "VolumeRecord",
    "VolumeStatistics",
]
