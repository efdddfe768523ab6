"""Tests for widget state outside a running app."""

from __future__ import annotations

import pytest
from textual.color import Color
from textual.widgets import Tab

from cloudctl.themes import DARK_THEME, DEFAULT_THEME
from cloudctl.widgets import (
    CustomBarChart,
    CustomGauge,
    CustomParagraph,
    CustomTabStrip,
    ProblemTable,
)


@pytest.mark.unit
@pytest.mark.fast
class TestCustomBarChart:
    """Tests for CustomBarChart data handling."""

    def test_starts_empty(self) -> None:
        """A new chart has no drawn data."""
        chart = CustomBarChart(["A", "B"], ["green", "red"], title="Chart")
        assert chart.bar_values == []
        assert chart.draw_count == 0
        assert "widget-custom-bar-chart" in chart.classes

    def test_set_data(self) -> None:
        """set_data stores values and counts draws."""
        chart = CustomBarChart(["A", "B"], ["green", "red"])
        chart.set_data([2, 5])
        assert chart.bar_values == [2.0, 5.0]
        assert chart.draw_count == 1

    def test_set_data_length_mismatch(self) -> None:
        """One value per label is required."""
        chart = CustomBarChart(["A", "B"], ["green", "red"], title="Chart")
        with pytest.raises(ValueError, match="expected 2 values"):
            chart.set_data([1])


@pytest.mark.unit
@pytest.mark.fast
class TestCustomGauge:
    """Tests for CustomGauge."""

    def test_defaults_to_theme_bar_color(self) -> None:
        """Without a bar color the theme's gauge color is used."""
        gauge = CustomGauge(title="API", theme=DARK_THEME)
        assert gauge.bar_color == DARK_THEME.gauge_bar
        assert gauge.percent == 0

    def test_set_percent_clamps(self) -> None:
        """Percentages are clamped to 0..100."""
        gauge = CustomGauge(title="API", bar_color="green")
        gauge.set_percent(140)
        assert gauge.percent == 100
        gauge.set_percent(-3)
        assert gauge.percent == 0

    def test_set_percent_with_color(self) -> None:
        """The bar color can change together with the value."""
        gauge = CustomGauge(title="Free", bar_color="green")
        gauge.set_percent(5, bar_color="red")
        assert gauge.bar_color == "red"

    def test_progress_follows_percent(self) -> None:
        """The progress bar counts in percent steps."""
        gauge = CustomGauge(title="API", bar_color="green")
        gauge.set_percent(42)
        assert gauge.total == 100
        assert gauge.progress == 42

    def test_bar_color_drives_gradient(self) -> None:
        """The bar is painted in a single solid color."""
        gauge = CustomGauge(title="Free", bar_color="green", theme=DEFAULT_THEME)
        gauge.set_percent(5, bar_color="red")
        assert gauge.gradient is not None
        assert gauge.gradient.get_color(0.5).rgb == Color.parse("red").rgb


@pytest.mark.unit
@pytest.mark.fast
class TestCustomParagraph:
    """Tests for CustomParagraph."""

    def test_set_text(self) -> None:
        """The current text is kept for inspection."""
        paragraph = CustomParagraph("first", title="Info")
        assert paragraph.paragraph_text == "first"
        paragraph.set_text("second")
        assert paragraph.paragraph_text == "second"
        assert paragraph.border_title == "Info"


@pytest.mark.unit
@pytest.mark.fast
class TestCustomTabStrip:
    """Tests for CustomTabStrip."""

    def test_set_active(self) -> None:
        """The active index follows set_active."""
        strip = CustomTabStrip(["Clusters", "Volumes"])
        assert strip.active_tab_index == 0
        strip.set_active(1)
        assert strip.active_tab_index == 1

    def test_index_of(self) -> None:
        """Tabs map back to their position; foreign tabs do not."""
        strip = CustomTabStrip(["Clusters", "Volumes"], theme=DARK_THEME)
        assert strip.index_of(Tab("(2) Volumes", id="dashboard-tab-2")) == 1
        assert strip.index_of(Tab("Other", id="other")) is None
        assert strip.tab_names == ["Clusters", "Volumes"]


@pytest.mark.unit
@pytest.mark.fast
class TestProblemTable:
    """Tests for ProblemTable before mounting."""

    def test_snapshot_before_mount(self, condition_factory) -> None:
        """Rows are kept as a snapshot until the table is mounted."""
        from datetime import datetime, timezone

        from cloudctl.models.summaries import ProblemRecord

        table = ProblemTable(title="Cluster Problems")
        now = datetime.now(timezone.utc)
        table.set_problems([ProblemRecord("a", "(API) down", now)])
        assert table.rows_snapshot == [("a", "(API) down")]
        assert table.border_title == "Cluster Problems"
