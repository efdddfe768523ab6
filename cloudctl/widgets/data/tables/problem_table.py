"""ProblemTable - scrollable two-column table of resource problems.

CSS Classes: widget-problem-table
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import contextmanager
from typing import ClassVar

from textual.widgets import DataTable

from cloudctl.models.summaries import ProblemRecord
from cloudctl.themes import DEFAULT_THEME, DashboardTheme


class ProblemTable(DataTable):
    """Table of ``(name, message)`` rows, newest problem first.

    CSS Classes: widget-problem-table
    """

    DEFAULT_CSS = """
    ProblemTable {
        height: 1fr;
        width: 1fr;
        border: round $surface-lighten-2;
        border-title-align: left;
    }
    """

    _COLUMN_DEFS: ClassVar[list[tuple[str, str]]] = [
        ("Name", "name"),
        ("Message", "message"),
    ]
    NAME_COLUMN_WIDTH: ClassVar[int] = 12
    _DEFAULT_CLASSES: ClassVar[str] = "widget-problem-table"

    def __init__(
        self,
        *,
        title: str = "",
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            id=id,
            classes=classes or self._DEFAULT_CLASSES,
            show_header=False,
            cursor_type="row",
            zebra_stripes=False,
        )
        self.border_title = title or None
        self.dashboard_theme = theme
        self.rows_snapshot: list[tuple[str, str]] = []
        self._message_width: int | None = None

    def on_mount(self) -> None:
        """Create the columns once the table is attached."""
        self._rebuild()

    @contextmanager
    def batch_update(self):
        """Sync context manager that batches app updates to avoid intermediate repaints."""
        try:
            app_batch = self.app.batch_update()
        except Exception:
            yield
            return
        with app_batch:
            yield

    def set_column_widths(self, total_width: int) -> None:
        """Give the name column a fixed width and the message column the rest.

        Args:
            total_width: Width of the table in cells.
        """
        message_width = max(1, total_width - self.NAME_COLUMN_WIDTH)
        if message_width == self._message_width:
            return
        self._message_width = message_width
        if self.is_mounted:
            self._rebuild()

    def set_problems(self, problems: Iterable[ProblemRecord]) -> None:
        """Replace all rows, keeping the given order.

        Args:
            problems: Problem records, already sorted.
        """
        self.rows_snapshot = [(problem.name, problem.message) for problem in problems]
        if self.is_mounted:
            self._rebuild()

    def _rebuild(self) -> None:
        """Recreate columns and rows from the current snapshot."""
        with self.batch_update():
            self.clear(columns=True)
            name_label, name_key = self._COLUMN_DEFS[0]
            message_label, message_key = self._COLUMN_DEFS[1]
            self.add_column(name_label, width=self.NAME_COLUMN_WIDTH, key=name_key)
            self.add_column(message_label, width=self._message_width, key=message_key)
            for name, message in self.rows_snapshot:
                self.add_row(name, message)
