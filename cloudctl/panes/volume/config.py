"""Volume pane configuration - labels, colors and thresholds."""

from __future__ import annotations

from typing import Final

from cloudctl.constants.limits import PHYSICAL_FREE_CRITICAL, PHYSICAL_FREE_WARNING

# ============================================================================
# Volume charts
# ============================================================================

VOLUME_STATE_TITLE: Final = "Volume State"
VOLUME_STATE_LABELS: Final[tuple[str, ...]] = ("Available", "Failed", "Unknown", "Other")
VOLUME_STATE_COLORS: Final[tuple[str, ...]] = ("green", "red", "yellow", "white")

PROTECTION_STATE_TITLE: Final = "Volume Protection State"
PROTECTION_STATE_LABELS: Final[tuple[str, ...]] = (
    "Protected",
    "Degraded",
    "Read-Only",
    "N/A",
    "Unknown",
)
PROTECTION_STATE_COLORS: Final[tuple[str, ...]] = (
    "green",
    "yellow",
    "red",
    "red",
    "white",
)

VOLUME_INFO_TITLE: Final = "Volume Infos"
VOLUME_INFO_TEMPLATE: Final = "Summed up physical size of volumes: {size}"

# ============================================================================
# Storage cluster section
# ============================================================================

PHYSICAL_FREE_TITLE: Final = "Free Physical Space"
COMPRESSION_RATIO_TITLE: Final = "Compression Ratio"
COMPRESSION_RATIO_COLOR: Final = "green"

CLUSTER_STATE_TITLE: Final = "Cluster State"
CLUSTER_STATE_LABELS: Final[tuple[str, ...]] = ("OK", "Warning", "Error", "Other")
CLUSTER_STATE_COLORS: Final[tuple[str, ...]] = ("green", "yellow", "red", "white")

SERVER_STATE_TITLE: Final = "Server State"
SERVER_STATE_LABELS: Final[tuple[str, ...]] = ("Enabled", "Disabled", "Failed", "Other")
SERVER_STATE_COLORS: Final[tuple[str, ...]] = ("green", "yellow", "red", "white")

# ============================================================================
# Geometry (terminal cells)
# ============================================================================

PARAGRAPH_HEIGHT: Final = 3
GAUGE_HEIGHT: Final = 3


def physical_free_color(percent: int) -> str:
    """Gauge color for the share of free physical storage."""
    if percent < PHYSICAL_FREE_CRITICAL:
        return "red"
    if percent < PHYSICAL_FREE_WARNING:
        return "yellow"
    return "green"
