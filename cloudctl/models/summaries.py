"""Per-render summaries produced by the parsers and drawn by the panes.

Summaries are transient: they are recomputed from scratch on every render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from cloudctl.constants.limits import PERCENT_MAX, PERCENT_MIN


def percentage(count: int | float, total: int | float) -> int:
    """Return ``count * 100 / total`` as an int clamped to 0..100.

    Callers must not pass a zero total; a pane with no records skips its
    gauges instead.
    """
    value = int(count * 100 // total)
    return max(PERCENT_MIN, min(PERCENT_MAX, value))


@dataclass(frozen=True)
class ProblemRecord:
    """A problem row: resource name, message and when it was reported."""

    name: str
    message: str
    timestamp: datetime


def sort_by_recency(records: list[ProblemRecord]) -> list[ProblemRecord]:
    """Sort records newest first; ties keep their fetch order."""
    return sorted(records, key=lambda record: record.timestamp, reverse=True)


@dataclass
class ClusterHealthSummary:
    """Reduced view of a cluster list."""

    total: int = 0
    succeeded: int = 0
    processing: int = 0
    unhealthy: int = 0
    api_ok: int = 0
    control_ok: int = 0
    nodes_ok: int = 0
    system_ok: int = 0
    problems: list[ProblemRecord] = field(default_factory=list)
    last_errors: list[ProblemRecord] = field(default_factory=list)

    @property
    def operation_histogram(self) -> list[int]:
        """Operation buckets in bar chart order."""
        return [self.succeeded, self.processing, self.unhealthy]

    def gauge_percentages(self) -> dict[str, int]:
        """Healthy-condition ratios per gauge title."""
        return {
            "API": percentage(self.api_ok, self.total),
            "Control": percentage(self.control_ok, self.total),
            "Nodes": percentage(self.nodes_ok, self.total),
            "System": percentage(self.system_ok, self.total),
        }


@dataclass
class VolumeHealthSummary:
    """Reduced view of a volume list."""

    total: int = 0
    available: int = 0
    failed: int = 0
    unknown: int = 0
    other: int = 0
    fully_protected: int = 0
    degraded: int = 0
    read_only: int = 0
    not_available: int = 0
    protection_unknown: int = 0
    physical_used: int = 0

    @property
    def state_histogram(self) -> list[int]:
        """Volume state buckets in bar chart order."""
        return [self.available, self.failed, self.unknown, self.other]

    @property
    def protection_histogram(self) -> list[int]:
        """Protection state buckets in bar chart order."""
        return [
            self.fully_protected,
            self.degraded,
            self.read_only,
            self.not_available,
            self.protection_unknown,
        ]


@dataclass
class StorageHealthSummary:
    """Reduced view of the storage cluster list."""

    total: int = 0
    ok: int = 0
    warning: int = 0
    error: int = 0
    other: int = 0
    servers_enabled: int = 0
    servers_disabled: int = 0
    servers_failed: int = 0
    servers_other: int = 0
    physical_free: int = 0
    physical_used: int = 0
    compression_ratio_sum: float = 0.0

    @property
    def health_histogram(self) -> list[int]:
        """Storage cluster health buckets in bar chart order."""
        return [self.ok, self.warning, self.error, self.other]

    @property
    def server_histogram(self) -> list[int]:
        """Server state buckets in bar chart order."""
        return [
            self.servers_enabled,
            self.servers_disabled,
            self.servers_failed,
            self.servers_other,
        ]

    @property
    def physical_free_percent(self) -> int | None:
        """Free share of physical storage, or None without capacity data."""
        capacity = self.physical_free + self.physical_used
        if capacity <= 0:
            return None
        return percentage(self.physical_free, capacity)

    @property
    def compression_ratio_percent(self) -> int | None:
        """Mean compression ratio as percent, or None without clusters."""
        if self.total <= 0:
            return None
        return percentage(self.compression_ratio_sum, self.total)


__all__ = [
    "ClusterHealthSummary",
    "ProblemRecord",
    "StorageHealthSummary",
    "VolumeHealthSummary",
    "percentage",
    "sort_by_recency",
]
