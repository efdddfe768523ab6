"""Storage parser - classifies storage clusters and their servers."""

from __future__ import annotations

from collections.abc import Iterable

from cloudctl.constants.enums import ServerState, StorageClusterHealth
from cloudctl.models.records import StorageClusterRecord
from cloudctl.models.summaries import StorageHealthSummary

# StorageClusterHealth.NONE counts as "other".
_HEALTH_COUNTERS: dict[str, str] = {
    StorageClusterHealth.OK.value: "ok",
    StorageClusterHealth.WARNING.value: "warning",
    StorageClusterHealth.ERROR.value: "error",
}

_SERVER_COUNTERS: dict[str, str] = {
    ServerState.ENABLED.value: "servers_enabled",
    ServerState.DISABLED.value: "servers_disabled",
    ServerState.FAILED.value: "servers_failed",
}


class StorageParser:
    """Reduces storage cluster records into a :class:`StorageHealthSummary`."""

    def summarize(self, clusters: Iterable[StorageClusterRecord]) -> StorageHealthSummary:
        """Classify storage cluster health, server states and capacity."""
        summary = StorageHealthSummary()
        for cluster in clusters:
            summary.total += 1
            if cluster.health is None or cluster.health.state is None:
                summary.other += 1
                continue

            counter = _HEALTH_COUNTERS.get(cluster.health.state, "other")
            setattr(summary, counter, getattr(summary, counter) + 1)

            for server in cluster.servers:
                server_state = server.state if server is not None else None
                server_counter = _SERVER_COUNTERS.get(server_state or "", "servers_other")
                setattr(summary, server_counter, getattr(summary, server_counter) + 1)

            statistics = cluster.statistics
            if statistics is None:
                continue
            if (
                statistics.free_physical_storage is None
                or statistics.physical_used_storage is None
                or statistics.compression_ratio is None
            ):
                continue
            summary.physical_free += statistics.free_physical_storage
            summary.physical_used += statistics.physical_used_storage
            summary.compression_ratio_sum += statistics.compression_ratio
        return summary
