"""CustomBarChart widget for displaying classification histograms.

CSS Classes: widget-custom-bar-chart
"""

from __future__ import annotations

from collections.abc import Sequence

from textual_plotext import PlotextPlot

from cloudctl.themes import DEFAULT_THEME, DashboardTheme

_BAR_WIDTH = 0.5


def _format_value(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


class CustomBarChart(PlotextPlot):
    """Bar chart of a fixed set of labelled buckets.

    Each bucket is drawn as its own plotext bar so that it keeps its color;
    tick labels carry the bucket name and its current value. The widget keeps
    the last drawn values until :meth:`set_data` is called again.

    CSS Classes: widget-custom-bar-chart
    """

    DEFAULT_CSS = """
    CustomBarChart {
        height: 12;
        width: 1fr;
        border: round $surface-lighten-2;
        border-title-align: left;
    }
    """

    def __init__(
        self,
        labels: Sequence[str],
        colors: Sequence[str],
        *,
        title: str = "",
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the bar chart.

        Args:
            labels: Bucket labels in display order.
            colors: Bar color per bucket.
            title: Border title.
            theme: Dashboard theme.
            id: Optional widget ID.
            classes: Optional CSS classes.
        """
        super().__init__(id=id, classes=classes or None)
        self.add_class("widget-custom-bar-chart")
        self.border_title = title or None
        self.dashboard_theme = theme
        self.bar_labels = list(labels)
        self.bar_colors = list(colors)
        self.bar_values: list[float] = []
        self.draw_count = 0

    @property
    def title(self) -> str:
        """The border title text."""
        return str(self.border_title or "")

    def on_mount(self) -> None:
        """Draw empty buckets until data arrives."""
        self._plot_bars()

    def set_data(self, values: Sequence[float]) -> None:
        """Replace the drawn values and repaint.

        Args:
            values: One value per label.

        Raises:
            ValueError: If the number of values differs from the labels.
        """
        if len(values) != len(self.bar_labels):
            raise ValueError(
                f"expected {len(self.bar_labels)} values for {self.title!r}, got {len(values)}"
            )
        self.bar_values = [float(value) for value in values]
        self.draw_count += 1
        if self.is_mounted:
            self._plot_bars()

    def _plot_bars(self) -> None:
        values = self.bar_values or [0.0] * len(self.bar_labels)
        positions = list(range(1, len(values) + 1))

        plt = self.plt
        plt.clear_data()
        for position, value, color in zip(positions, values, self.bar_colors):
            plt.bar([position], [value], color=color, width=_BAR_WIDTH, reset_ticks=False)
        plt.xticks(
            positions,
            [f"{label} {_format_value(value)}" for label, value in zip(self.bar_labels, values)],
        )
        plt.ylim(0, max(max(values, default=0.0), 1.0))
        self.refresh()
