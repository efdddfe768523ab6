"""Cluster pane - cluster operation states, condition gauges and problem tables."""

from __future__ import annotations

import logging
import math

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widget import Widget

from cloudctl.controllers.cluster import ClusterController
from cloudctl.panes.base_pane import DashboardPane
from cloudctl.panes.cluster.config import (
    CHART_HEIGHT,
    CHART_WIDTH,
    GAUGE_COLOR,
    GAUGE_HEIGHT,
    GAUGE_OFFSET,
    GAUGE_TITLES,
    LAST_ERRORS_TABLE_TITLE,
    OPERATION_CHART_TITLE,
    OPERATION_COLORS,
    OPERATION_LABELS,
    PROBLEMS_TABLE_TITLE,
)
from cloudctl.themes import DEFAULT_THEME, DashboardTheme
from cloudctl.utils.geometry import Rect
from cloudctl.widgets import CustomBarChart, CustomGauge, ProblemTable

logger = logging.getLogger(__name__)


def _gauge_id(title: str) -> str:
    return f"cluster-gauge-{title.lower()}"


class ClusterPane(DashboardPane):
    """Cluster health and issues."""

    TAB_NAME = "Clusters"
    TAB_DESCRIPTION = "Cluster health and issues"

    def __init__(
        self,
        controller: ClusterController,
        *,
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = "pane-clusters",
    ) -> None:
        super().__init__(theme=theme, id=id)
        self._controller = controller

        self.health_chart = CustomBarChart(
            OPERATION_LABELS,
            OPERATION_COLORS,
            title=OPERATION_CHART_TITLE,
            theme=theme,
            id="cluster-health",
        )
        self.gauges: dict[str, CustomGauge] = {
            title: CustomGauge(
                title=title, bar_color=GAUGE_COLOR, theme=theme, id=_gauge_id(title)
            )
            for title in GAUGE_TITLES
        }
        self.problems_table = ProblemTable(
            title=PROBLEMS_TABLE_TITLE, theme=theme, id="cluster-problems"
        )
        self.last_errors_table = ProblemTable(
            title=LAST_ERRORS_TABLE_TITLE, theme=theme, id="cluster-last-errors"
        )
        self._gauge_column = Vertical(*self.gauges.values(), classes="pane-row")

    def compose(self) -> ComposeResult:
        """Compose chart and gauges side by side above the two tables."""
        yield Horizontal(self.health_chart, self._gauge_column, classes="pane-row")
        yield self.problems_table
        yield self.last_errors_table

    def layout_for(self, rect: Rect) -> dict[str, Rect]:
        """Chart top-left, gauges stacked to its right, tables split the rest."""
        x1, y1, x2, y2 = rect
        layout = {
            "cluster-health": Rect(x1, y1, x1 + CHART_WIDTH, y1 + CHART_HEIGHT),
        }
        for index, title in enumerate(GAUGE_TITLES):
            top = y1 + index * GAUGE_HEIGHT
            layout[_gauge_id(title)] = Rect(x1 + GAUGE_OFFSET, top, x2, top + GAUGE_HEIGHT)

        table_top = y1 + CHART_HEIGHT
        table_height = max(0, math.ceil((y2 - table_top) / 2))
        layout["cluster-problems"] = Rect(x1, table_top, x2, table_top + table_height)
        layout["cluster-last-errors"] = Rect(x1, table_top + table_height, x2, y2)
        return layout

    def _layout_widgets(self) -> dict[str, Widget]:
        widgets: dict[str, Widget] = {
            "cluster-health": self.health_chart,
            "cluster-problems": self.problems_table,
            "cluster-last-errors": self.last_errors_table,
        }
        for title, gauge in self.gauges.items():
            widgets[_gauge_id(title)] = gauge
        return widgets

    def resize(self, rect: Rect) -> None:
        """Fit widgets and keep the gap between chart and gauges."""
        super().resize(rect)
        self._gauge_column.styles.margin = (0, 0, 0, GAUGE_OFFSET - CHART_WIDTH)
        self.problems_table.set_column_widths(rect.width)
        self.last_errors_table.set_column_widths(rect.width)

    async def _render_pane(self) -> None:
        summary = await self._controller.fetch_all()
        if summary.total <= 0:
            return

        self.draw_histogram(self.health_chart, summary.operation_histogram)
        self.problems_table.set_problems(summary.problems)
        self.last_errors_table.set_problems(summary.last_errors)
        for title, percent in summary.gauge_percentages().items():
            self.gauges[title].set_percent(percent)
