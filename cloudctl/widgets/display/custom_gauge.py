"""CustomGauge widget for displaying a percentage.

CSS Classes: widget-custom-gauge
"""

from __future__ import annotations

from textual.color import Gradient
from textual.widgets import ProgressBar

from cloudctl.constants.limits import PERCENT_MAX, PERCENT_MIN
from cloudctl.themes import DEFAULT_THEME, DashboardTheme


def _solid(color: str) -> Gradient:
    return Gradient.from_colors(color, color)


class CustomGauge(ProgressBar):
    """Bordered progress bar showing a share in percent.

    CSS Classes: widget-custom-gauge
    """

    DEFAULT_CSS = """
    CustomGauge {
        height: 3;
        width: 1fr;
        border: round $surface-lighten-2;
        border-title-align: left;
    }
    CustomGauge Bar {
        width: 1fr;
    }
    """

    def __init__(
        self,
        *,
        title: str = "",
        bar_color: str | None = None,
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        self.bar_color = bar_color or theme.gauge_bar
        super().__init__(
            total=PERCENT_MAX,
            show_eta=False,
            id=id,
            classes=classes or None,
            gradient=_solid(self.bar_color),
        )
        self.add_class("widget-custom-gauge")
        self.border_title = title or None
        self.dashboard_theme = theme
        self.percent = 0
        self.styles.color = theme.gauge_label

    def set_percent(self, percent: int, *, bar_color: str | None = None) -> None:
        """Set the filled share and optionally a new bar color.

        Args:
            percent: Value in percent, clamped to 0..100.
            bar_color: Optional new bar color.
        """
        self.percent = max(PERCENT_MIN, min(PERCENT_MAX, int(percent)))
        if bar_color is not None and bar_color != self.bar_color:
            self.bar_color = bar_color
            self.gradient = _solid(bar_color)
        self.update(progress=self.percent)
