"""CustomTabStrip widget - one-line numbered tab bar.

CSS Classes: widget-custom-tab-strip
"""

from __future__ import annotations

from collections.abc import Sequence

from textual.widgets import Tab, Tabs

from cloudctl.themes import DEFAULT_THEME, DashboardTheme


def _tab_id(index: int) -> str:
    return f"dashboard-tab-{index + 1}"


class CustomTabStrip(Tabs):
    """Tabs labelled ``(1) Name``, ``(2) Name`` in dashboard tab order.

    The strip only mirrors the active pane; activating a tab posts the usual
    ``Tabs.TabActivated`` message for the app to act on.
    """

    DEFAULT_CSS = """
    CustomTabStrip {
        height: 1;
        width: 1fr;
    }
    """

    def __init__(
        self,
        names: Sequence[str],
        *,
        active_index: int = 0,
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        tabs = [Tab(f"({index + 1}) {name}", id=_tab_id(index)) for index, name in enumerate(names)]
        super().__init__(
            *tabs,
            active=_tab_id(active_index) if tabs else None,
            id=id,
            classes=classes or None,
        )
        self.add_class("widget-custom-tab-strip")
        self.dashboard_theme = theme
        self.tab_names = list(names)
        self.active_tab_index = active_index
        self.styles.color = theme.tab_text

    def index_of(self, tab: Tab) -> int | None:
        """Return the position of ``tab`` in the strip, or None if unknown."""
        for index in range(len(self.tab_names)):
            if tab.id == _tab_id(index):
                return index
        return None

    def set_active(self, index: int) -> None:
        """Highlight the tab at ``index``."""
        self.active_tab_index = index
        if self.is_mounted:
            self.active = _tab_id(index)
