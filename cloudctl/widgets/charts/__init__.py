"""Chart widgets for the dashboard."""

from cloudctl.widgets.charts.custom_bar_chart import CustomBarChart

__all__ = ["CustomBarChart"]
