"""Tab widgets for the dashboard."""

from cloudctl.widgets.tabs.custom_tab_strip import CustomTabStrip

__all__ = ["CustomTabStrip"]
