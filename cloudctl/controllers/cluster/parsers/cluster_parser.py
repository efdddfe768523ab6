"""Cluster parser - classifies cluster records into health buckets."""

from __future__ import annotations

import re
from collections.abc import Iterable
from contextlib import suppress
from datetime import datetime

from cloudctl.constants.enums import (
    ClusterConditionType,
    ClusterOperationState,
    ConditionStatus,
)
from cloudctl.models.records import ClusterCondition, ClusterRecord
from cloudctl.models.summaries import (
    ClusterHealthSummary,
    ProblemRecord,
    sort_by_recency,
)

# Condition type -> summary counter attribute
_CONDITION_COUNTERS: dict[str, str] = {
    ClusterConditionType.API_SERVER_AVAILABLE.value: "api_ok",
    ClusterConditionType.CONTROL_PLANE_HEALTHY.value: "control_ok",
    ClusterConditionType.EVERY_NODE_READY.value: "nodes_ok",
    ClusterConditionType.SYSTEM_COMPONENTS_HEALTHY.value: "system_ok",
}

_HEALTHY_CONDITION_STATUSES = frozenset(
    {ConditionStatus.TRUE.value, ConditionStatus.PROGRESSING.value}
)

# fromisoformat before 3.11 only takes 3 or 6 fraction digits
_FRACTION_RE = re.compile(r"\.(\d+)(?=[+-]\d{2}:\d{2}$)")


def parse_timestamp(timestamp: str | None) -> datetime | None:
    """Parse an RFC3339 timestamp, returning None when it is unusable."""
    if not isinstance(timestamp, str) or not timestamp:
        return None
    parsed: datetime | None = None
    with suppress(ValueError, TypeError):
        normalized = _FRACTION_RE.sub(
            lambda match: "." + match.group(1)[:6].ljust(6, "0"),
            timestamp.replace("Z", "+00:00"),
        )
        parsed = datetime.fromisoformat(normalized)
    # RFC3339 always carries an offset; naive values cannot be ordered.
    if parsed is None or parsed.tzinfo is None:
        return None
    return parsed


class ClusterParser:
    """Reduces cluster records into a :class:`ClusterHealthSummary`."""

    def summarize(self, clusters: Iterable[ClusterRecord]) -> ClusterHealthSummary:
        """Classify clusters by operation state and condition health.

        Args:
            clusters: Cluster records from the API

        Returns:
            ClusterHealthSummary with problems and errors sorted newest first.
        """
        summary = ClusterHealthSummary()
        problems: list[ProblemRecord] = []
        last_errors: list[ProblemRecord] = []

        for cluster in clusters:
            summary.total += 1
            state = cluster.operation_state
            if not state:
                summary.unhealthy += 1
                continue

            if state == ClusterOperationState.SUCCEEDED.value:
                summary.succeeded += 1
            elif state == ClusterOperationState.PROCESSING.value:
                summary.processing += 1
            else:
                summary.unhealthy += 1

            status = cluster.status
            if status is None:
                continue

            for condition in status.conditions:
                if condition is None or condition.status is None or condition.type is None:
                    continue
                if condition.status not in _HEALTHY_CONDITION_STATUSES:
                    problem = self._condition_problem(cluster.name, condition)
                    if problem is not None:
                        problems.append(problem)
                    continue
                counter = _CONDITION_COUNTERS.get(condition.type)
                if counter is not None:
                    setattr(summary, counter, getattr(summary, counter) + 1)

            for error in status.last_errors:
                if error is None or not cluster.name or error.description is None:
                    continue
                timestamp = parse_timestamp(error.last_update_time)
                if timestamp is None:
                    continue
                last_errors.append(
                    ProblemRecord(
                        name=cluster.name,
                        message=error.description,
                        timestamp=timestamp,
                    )
                )

        summary.problems = sort_by_recency(problems)
        summary.last_errors = sort_by_recency(last_errors)
        return summary

    @staticmethod
    def _condition_problem(
        cluster_name: str | None, condition: ClusterCondition
    ) -> ProblemRecord | None:
        """Build a problem row for an unhealthy condition, if it is complete."""
        if not cluster_name or condition.message is None:
            return None
        timestamp = parse_timestamp(condition.last_update_time)
        if timestamp is None:
            return None
        return ProblemRecord(
            name=cluster_name,
            message=f"({condition.type}) {condition.message}",
            timestamp=timestamp,
        )
