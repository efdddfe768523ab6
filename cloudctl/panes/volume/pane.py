"""Volume pane - volume states and, for provider admins, storage cluster health."""

from __future__ import annotations

import logging
import math

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget

from cloudctl.controllers.volume import VolumeController
from cloudctl.models.summaries import StorageHealthSummary
from cloudctl.panes.base_pane import DashboardPane
from cloudctl.panes.volume.config import (
    CLUSTER_STATE_COLORS,
    CLUSTER_STATE_LABELS,
    CLUSTER_STATE_TITLE,
    COMPRESSION_RATIO_COLOR,
    COMPRESSION_RATIO_TITLE,
    GAUGE_HEIGHT,
    PARAGRAPH_HEIGHT,
    PHYSICAL_FREE_TITLE,
    PROTECTION_STATE_COLORS,
    PROTECTION_STATE_LABELS,
    PROTECTION_STATE_TITLE,
    SERVER_STATE_COLORS,
    SERVER_STATE_LABELS,
    SERVER_STATE_TITLE,
    VOLUME_INFO_TEMPLATE,
    VOLUME_INFO_TITLE,
    VOLUME_STATE_COLORS,
    VOLUME_STATE_LABELS,
    VOLUME_STATE_TITLE,
    physical_free_color,
)
from cloudctl.themes import DEFAULT_THEME, DashboardTheme
from cloudctl.utils.geometry import Rect
from cloudctl.utils.humanize import humanize_size
from cloudctl.widgets import CustomBarChart, CustomGauge, CustomParagraph

logger = logging.getLogger(__name__)


class VolumePane(DashboardPane):
    """Volume health, for operators also cluster health."""

    TAB_NAME = "Volumes"
    TAB_DESCRIPTION = "Volume health, for operators also cluster health"

    def __init__(
        self,
        controller: VolumeController,
        *,
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = "pane-volumes",
    ) -> None:
        super().__init__(theme=theme, id=id)
        self._controller = controller

        self.volume_state_chart = CustomBarChart(
            VOLUME_STATE_LABELS,
            VOLUME_STATE_COLORS,
            title=VOLUME_STATE_TITLE,
            theme=theme,
            id="volume-state",
        )
        self.protection_state_chart = CustomBarChart(
            PROTECTION_STATE_LABELS,
            PROTECTION_STATE_COLORS,
            title=PROTECTION_STATE_TITLE,
            theme=theme,
            id="volume-protection-state",
        )
        self.used_space = CustomParagraph(
            "", title=VOLUME_INFO_TITLE, theme=theme, id="volume-used-space"
        )
        self.physical_free_gauge = CustomGauge(
            title=PHYSICAL_FREE_TITLE, theme=theme, id="storage-physical-free"
        )
        self.compression_ratio_gauge = CustomGauge(
            title=COMPRESSION_RATIO_TITLE,
            bar_color=COMPRESSION_RATIO_COLOR,
            theme=theme,
            id="storage-compression-ratio",
        )
        self.cluster_state_chart = CustomBarChart(
            CLUSTER_STATE_LABELS,
            CLUSTER_STATE_COLORS,
            title=CLUSTER_STATE_TITLE,
            theme=theme,
            id="storage-cluster-state",
        )
        self.server_state_chart = CustomBarChart(
            SERVER_STATE_LABELS,
            SERVER_STATE_COLORS,
            title=SERVER_STATE_TITLE,
            theme=theme,
            id="storage-server-state",
        )

    def compose(self) -> ComposeResult:
        """Compose volume charts on top, storage cluster widgets below."""
        yield Horizontal(
            self.volume_state_chart, self.protection_state_chart, classes="pane-row"
        )
        yield self.used_space
        yield Horizontal(
            self.physical_free_gauge, self.compression_ratio_gauge, classes="pane-row"
        )
        yield Horizontal(
            self.cluster_state_chart, self.server_state_chart, classes="pane-row"
        )

    def layout_for(self, rect: Rect) -> dict[str, Rect]:
        """Two columns; volume charts take the upper half of the pane."""
        x1, y1, x2, y2 = rect
        middle_x = x1 + math.ceil(rect.width / 2)
        middle_y = y1 + math.ceil(rect.height / 2)
        gauges_top = middle_y + PARAGRAPH_HEIGHT
        charts_top = gauges_top + GAUGE_HEIGHT
        return {
            "volume-state": Rect(x1, y1, middle_x, middle_y),
            "volume-protection-state": Rect(middle_x, y1, x2, middle_y),
            "volume-used-space": Rect(x1, middle_y, x2, gauges_top),
            "storage-physical-free": Rect(x1, gauges_top, middle_x, charts_top),
            "storage-compression-ratio": Rect(middle_x, gauges_top, x2, charts_top),
            "storage-cluster-state": Rect(x1, charts_top, middle_x, y2),
            "storage-server-state": Rect(middle_x, charts_top, x2, y2),
        }

    def _layout_widgets(self) -> dict[str, Widget]:
        widgets: list[Widget] = [
            self.volume_state_chart,
            self.protection_state_chart,
            self.used_space,
            self.physical_free_gauge,
            self.compression_ratio_gauge,
            self.cluster_state_chart,
            self.server_state_chart,
        ]
        return {widget.id: widget for widget in widgets if widget.id}

    async def _render_pane(self) -> None:
        data = await self._controller.fetch_all()

        volumes = data.volumes
        self.used_space.set_text(
            VOLUME_INFO_TEMPLATE.format(size=humanize_size(volumes.physical_used))
        )
        self.draw_histogram(self.volume_state_chart, volumes.state_histogram)
        self.draw_histogram(self.protection_state_chart, volumes.protection_histogram)

        if data.storage is None:
            return
        self._render_storage(data.storage)

    def _render_storage(self, storage: StorageHealthSummary) -> None:
        free_percent = storage.physical_free_percent
        if free_percent is not None:
            self.physical_free_gauge.set_percent(
                free_percent, bar_color=physical_free_color(free_percent)
            )

        compression_percent = storage.compression_ratio_percent
        if compression_percent is not None:
            self.compression_ratio_gauge.set_percent(compression_percent)

        self.draw_histogram(self.cluster_state_chart, storage.health_histogram)
        self.draw_histogram(self.server_state_chart, storage.server_histogram)
