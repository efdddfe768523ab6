"""Widgets module for the cloudctl dashboard.

This module provides the widgets the panes render into, each a themed
wrapper around a library widget:
- charts: CustomBarChart (textual-plotext)
- display: CustomGauge (ProgressBar), CustomParagraph (Static)
- data: ProblemTable (DataTable)
- tabs: CustomTabStrip (Tabs)
"""

# Chart widgets
from cloudctl.widgets.charts import CustomBarChart

# Data display widgets
from cloudctl.widgets.data import ProblemTable

# Display widgets
from cloudctl.widgets.display import CustomGauge, CustomParagraph

# Tab widgets
from cloudctl.widgets.tabs import CustomTabStrip

__all__ = [
    # Charts
    "CustomBarChart",
    # Display
    "CustomGauge",
    "CustomParagraph",
    # Tabs
    "CustomTabStrip",
    # Data tables
    "ProblemTable",
]
