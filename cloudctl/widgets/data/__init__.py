"""Data display widgets for the dashboard."""

from cloudctl.widgets.data.tables import ProblemTable

__all__ = ["ProblemTable"]
