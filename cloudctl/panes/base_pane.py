"""Base pane - the contract shared by all dashboard tabs."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import ClassVar

from textual.containers import Container
from textual.widget import Widget

from cloudctl.themes import DEFAULT_THEME, DashboardTheme
from cloudctl.utils.geometry import Rect
from cloudctl.utils.render_guard import RenderGuard
from cloudctl.widgets import CustomBarChart

logger = logging.getLogger(__name__)


class DashboardPane(Container):
    """A self-rendering dashboard region tied to one data domain.

    Subclasses define ``TAB_NAME``/``TAB_DESCRIPTION``, compose their widgets,
    map them to rectangles in :meth:`layout_for` and draw fetched data in
    :meth:`_render_pane`.
    """

    DEFAULT_CSS = """
    DashboardPane {
        height: 1fr;
        width: 1fr;
    }
    DashboardPane .pane-row {
        height: auto;
        width: 1fr;
    }
    """

    TAB_NAME: ClassVar[str] = ""
    TAB_DESCRIPTION: ClassVar[str] = ""

    def __init__(
        self,
        *,
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.dashboard_theme = theme
        self.rect: Rect | None = None
        self._guard = RenderGuard()

    @property
    def tab_name(self) -> str:
        """Name shown in the tab strip and accepted by ``--initial-tab``."""
        return self.TAB_NAME

    @property
    def tab_description(self) -> str:
        """One-line description of the pane."""
        return self.TAB_DESCRIPTION

    @property
    def render_guard(self) -> RenderGuard:
        """The pane's own render guard."""
        return self._guard

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def layout_for(self, rect: Rect) -> dict[str, Rect]:
        """Map widget ids to the rectangles they occupy inside ``rect``."""
        raise NotImplementedError

    def resize(self, rect: Rect) -> None:
        """Fit the pane and its widgets into ``rect``."""
        self.rect = rect
        self.styles.width = rect.width
        self.styles.height = rect.height
        self._apply_layout(self.layout_for(rect))

    def _apply_layout(self, layout: Mapping[str, Rect]) -> None:
        widgets = self._layout_widgets()
        for widget_id, widget_rect in layout.items():
            widget = widgets.get(widget_id)
            if widget is None:
                continue
            widget.styles.width = widget_rect.width
            widget.styles.height = widget_rect.height

    def _layout_widgets(self) -> dict[str, Widget]:
        """Widgets addressed by :meth:`layout_for`, keyed by id."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    async def render_pane(self) -> None:
        """Fetch and draw once; a no-op while a previous render is in flight.

        Raises:
            CloudAPIError: If the primary fetch fails.
        """
        with self._guard.attempt() as acquired:
            if not acquired:
                logger.debug("%s render in flight, dropping request", self.tab_name)
                return
            await self._render_pane()

    async def _render_pane(self) -> None:
        raise NotImplementedError

    @staticmethod
    def draw_histogram(chart: CustomBarChart, values: Sequence[int]) -> bool:
        """Draw ``values`` unless every bucket is zero.

        An all-zero histogram leaves the previous bars on screen.

        Returns:
            True if the chart was redrawn.
        """
        if not any(values):
            return False
        chart.set_data(values)
        return True
