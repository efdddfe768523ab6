"""Volume parser - classifies volume records by state and protection."""

from __future__ import annotations

from collections.abc import Iterable

from cloudctl.constants.enums import ProtectionState, VolumeState
from cloudctl.models.records import VolumeRecord
from cloudctl.models.summaries import VolumeHealthSummary

_STATE_COUNTERS: dict[str, str] = {
    VolumeState.AVAILABLE.value: "available",
    VolumeState.FAILED.value: "failed",
    VolumeState.UNKNOWN.value: "unknown",
}

_PROTECTION_COUNTERS: dict[str, str] = {
    ProtectionState.FULLY_PROTECTED.value: "fully_protected",
    ProtectionState.DEGRADED.value: "degraded",
    ProtectionState.READ_ONLY.value: "read_only",
    ProtectionState.NOT_AVAILABLE.value: "not_available",
    ProtectionState.UNKNOWN.value: "protection_unknown",
}


class VolumeParser:
    """Reduces volume records into a :class:`VolumeHealthSummary`."""

    def summarize(self, volumes: Iterable[VolumeRecord]) -> VolumeHealthSummary:
        """Classify volumes and sum up their physical usage."""
        summary = VolumeHealthSummary()
        for volume in volumes:
            summary.total += 1
            if volume.state is None or volume.protection_state is None:
                summary.other += 1
                summary.protection_unknown += 1
                continue

            state_counter = _STATE_COUNTERS.get(volume.state, "other")
            setattr(summary, state_counter, getattr(summary, state_counter) + 1)

            protection_counter = _PROTECTION_COUNTERS.get(
                volume.protection_state, "protection_unknown"
            )
            setattr(summary, protection_counter, getattr(summary, protection_counter) + 1)

            statistics = volume.statistics
            if statistics is not None and statistics.physical_used_storage is not None:
                summary.physical_used += statistics.physical_used_storage
        return summary
