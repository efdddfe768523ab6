"""Cluster pane configuration - labels, colors and geometry."""

from __future__ import annotations

from typing import Final

# ============================================================================
# Operation bar chart
# ============================================================================

OPERATION_CHART_TITLE: Final = "Cluster Operation"
OPERATION_LABELS: Final[tuple[str, ...]] = ("Succeeded", "Progressing", "Unhealthy")
OPERATION_COLORS: Final[tuple[str, ...]] = ("green", "yellow", "red")

# ============================================================================
# Condition gauges (title order matches ClusterHealthSummary.gauge_percentages)
# ============================================================================

GAUGE_TITLES: Final[tuple[str, ...]] = ("API", "Control", "Nodes", "System")
GAUGE_COLOR: Final = "green"

# ============================================================================
# Tables
# ============================================================================

PROBLEMS_TABLE_TITLE: Final = "Cluster Problems"
LAST_ERRORS_TABLE_TITLE: Final = "Last Errors"

# ============================================================================
# Geometry (terminal cells)
# ============================================================================

CHART_WIDTH: Final = 48
CHART_HEIGHT: Final = 12
GAUGE_OFFSET: Final = 50
GAUGE_HEIGHT: Final = 3
