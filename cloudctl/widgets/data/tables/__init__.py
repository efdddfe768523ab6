"""Table widgets."""

from cloudctl.widgets.data.tables.problem_table import ProblemTable

__all__ = ["ProblemTable"]
