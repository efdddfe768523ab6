"""Main application class for the cloudctl dashboard."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import ClassVar

from rich.markup import escape
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.events import Resize
from textual.worker import Worker, WorkerState

from cloudctl import __version__
from cloudctl.api.errors import CloudAPIError
from cloudctl.constants import (
    APP_TITLE,
    FILTER_HEADER_WIDTH,
    GLOSSARY_LINE,
    HEADER_HEIGHT,
    STATUS_UNKNOWN,
    TAB_STRIP_HEIGHT,
    ApiHealthStatus,
)
from cloudctl.constants.values import FILTER_HEADER_TITLE, LAST_UPDATE_FORMAT
from cloudctl.controllers import CloudAPI, StatusController
from cloudctl.keyboard.app import APP_BINDINGS, TAB_BINDINGS
from cloudctl.models.config import DashboardConfig
from cloudctl.panes import DashboardPane, TabSet, build_panes
from cloudctl.themes import resolve_theme
from cloudctl.utils.geometry import Rect
from cloudctl.utils.render_guard import RenderGuard
from cloudctl.widgets import CustomParagraph, CustomTabStrip

logger = logging.getLogger(__name__)

_RENDER_GROUP = "dashboard-render"

_HEALTH_COLORS: dict[str, str] = {
    ApiHealthStatus.HEALTHY.value: "green",
    ApiHealthStatus.DEGRADED.value: "yellow",
    ApiHealthStatus.PARTIALLY_UNHEALTHY.value: "yellow",
    ApiHealthStatus.UNHEALTHY.value: "red",
}


def format_health(status: str, message: str = "") -> str:
    """Return the API health as Rich markup, colored by severity.

    Only an unhealthy API shows its message.
    """
    text = escape(status)
    if status == ApiHealthStatus.UNHEALTHY.value and message:
        text = f"{text} ({escape(message)})"
    color = _HEALTH_COLORS.get(status)
    if color is None:
        return text
    return f"[{color}]{text}[/{color}]"


class CloudDashboardApp(App[None]):
    """Live terminal dashboard over the cloud API.

    Owns the header, the tab strip and the tab set, lays them out on resize
    and drives render cycles from a timer and from key presses. A render that
    arrives while another is in flight is dropped.
    """

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: ClassVar[list[Binding]] = [*APP_BINDINGS, *TAB_BINDINGS]

    def __init__(
        self,
        client: CloudAPI,
        config: DashboardConfig,
        *,
        panes: list[DashboardPane] | None = None,
        **kwargs,
    ) -> None:
        """Initialize the dashboard.

        Args:
            client: API boundary shared by all controllers.
            config: Filters and presentation options.
            panes: Panes in tab order; the cluster and volume panes by default.

        Raises:
            ConfigError: If the theme or the initial tab is unknown.
        """
        super().__init__(**kwargs)
        self.config = config
        self.dashboard_theme = resolve_theme(config.color_theme)
        self._client = client
        self._status = StatusController(client, request_timeout=config.request_timeout)
        self._guard = RenderGuard()

        self.tabs = TabSet(
            panes
            if panes is not None
            else build_panes(client, config, self.dashboard_theme)
        )
        if config.initial_tab:
            self.tabs.select(self.tabs.find_index_by_name(config.initial_tab))

        self.api_version = STATUS_UNKNOWN
        self.api_health = STATUS_UNKNOWN
        self.api_health_message = ""
        self.last_update: datetime | None = None
        self.last_error: Exception | None = None

        self.status_header = CustomParagraph(
            "", title=APP_TITLE, theme=self.dashboard_theme, id="status-header"
        )
        self.filter_header = CustomParagraph(
            "",
            title=FILTER_HEADER_TITLE,
            theme=self.dashboard_theme,
            id="filter-header",
        )
        self.tab_strip = CustomTabStrip(
            self.tabs.names,
            active_index=self.tabs.active_index,
            theme=self.dashboard_theme,
            id="tab-strip",
        )
        self.panes_container = Container(*self.tabs, id="dashboard-panes")

    @property
    def render_guard(self) -> RenderGuard:
        """The dashboard-wide render guard."""
        return self._guard

    def compose(self) -> ComposeResult:
        """Compose header band, panes and tab strip."""
        with Horizontal(id="dashboard-header"):
            yield self.status_header
            yield self.filter_header
        yield self.panes_container
        yield self.tab_strip

    def on_mount(self) -> None:
        """Lay out, draw once and start the refresh timer."""
        self.theme = self.dashboard_theme.textual_theme
        self._show_active_pane()
        self.resize_dashboard(0, 0, self.size.width, self.size.height)
        self.request_render()
        self.set_interval(self.config.refresh_interval, self.request_render)

    async def on_unmount(self) -> None:
        """Close the API client when it supports closing."""
        aclose = getattr(self._client, "aclose", None)
        if callable(aclose):
            await aclose()

    def on_resize(self, event: Resize) -> None:
        """Recompute geometry, clear and redraw."""
        self.resize_dashboard(0, 0, event.size.width, event.size.height)
        self.refresh(layout=True)
        self.request_render()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def layout_for(self, rect: Rect) -> dict[str, Rect]:
        """Split the screen into header band, pane area and tab strip."""
        x1, y1, x2, y2 = rect
        header_bottom = y1 + HEADER_HEIGHT
        filter_left = max(x1, x2 - FILTER_HEADER_WIDTH)
        strip_top = max(header_bottom, y2 - TAB_STRIP_HEIGHT)
        return {
            "status-header": Rect(x1, y1, filter_left, header_bottom),
            "filter-header": Rect(filter_left, y1, x2, header_bottom),
            "dashboard-panes": Rect(x1, header_bottom, x2, strip_top),
            "tab-strip": Rect(x1, strip_top, x2, y2),
        }

    def resize_dashboard(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Fit header, tab strip and every pane into the given rectangle."""
        layout = self.layout_for(Rect(x1, y1, x2, y2))
        for widget in (
            self.status_header,
            self.filter_header,
            self.panes_container,
            self.tab_strip,
        ):
            widget_rect = layout[widget.id or ""]
            widget.styles.width = widget_rect.width
            widget.styles.height = widget_rect.height

        pane_rect = layout["dashboard-panes"]
        for pane in self.tabs:
            pane.resize(pane_rect)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def request_render(self) -> None:
        """Start a render cycle in a worker."""
        self.run_worker(
            self.render_dashboard(),
            group=_RENDER_GROUP,
            exit_on_error=False,
        )

    async def render_dashboard(self) -> None:
        """Run one render cycle unless one is already in flight."""
        with self._guard.attempt() as acquired:
            if not acquired:
                logger.debug("Dashboard render in flight, dropping request")
                return
            await self._render_cycle()

    async def _render_cycle(self) -> None:
        self.filter_header.set_text(escape(self.config.filters.header_text()))
        self.tab_strip.set_active(self.tabs.active_index)

        self.api_version = STATUS_UNKNOWN
        self.api_health = STATUS_UNKNOWN
        self.api_health_message = ""
        self.last_error = None
        try:
            self.api_version, health = await self._status.fetch_all()
            self.api_health = health.status or STATUS_UNKNOWN
            self.api_health_message = health.message
            await self.tabs.active.render_pane()
        except CloudAPIError as exc:
            logger.warning("Dashboard update failed: %s", exc)
            self.last_error = exc
        except Exception as exc:
            logger.exception("Unexpected error during dashboard update")
            self.last_error = exc
        finally:
            self.last_update = datetime.now()
            self.status_header.set_text(self.status_text())

    def status_text(self) -> str:
        """Build the three status header lines as Rich markup."""
        version_line = (
            f"cloud-api {escape(self.api_version)} "
            f"(API Health: {format_health(self.api_health, self.api_health_message)}), "
            f"cloudctl {__version__}"
        )
        last_update = (
            self.last_update.strftime(LAST_UPDATE_FORMAT) if self.last_update else ""
        )
        fetch_line = f"Last Update: {last_update}"
        if self.last_error is not None:
            fetch_line += f", [red]Update Error: {escape(str(self.last_error))}[/red]"
        return f"{version_line}\n{fetch_line}\n{GLOSSARY_LINE}"

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log render workers that failed outside the API error path."""
        if event.worker.group == _RENDER_GROUP and event.state == WorkerState.ERROR:
            logger.error("Render worker failed: %s", event.worker.error)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_switch_tab(self, number: int) -> None:
        """Make tab ``number`` (1-based) active, clear and redraw."""
        if not self.tabs.select(number - 1):
            return
        self._show_active_pane()
        self.tab_strip.set_active(self.tabs.active_index)
        self.refresh(layout=True)
        self.request_render()

    @on(CustomTabStrip.TabActivated, "#tab-strip")
    def _on_tab_strip_activated(self, event: CustomTabStrip.TabActivated) -> None:
        index = self.tab_strip.index_of(event.tab)
        if index is None or index == self.tabs.active_index:
            return
        self.action_switch_tab(index + 1)

    def _show_active_pane(self) -> None:
        active = self.tabs.active
        for pane in self.tabs:
            pane.display = pane is active


__all__ = ["CloudDashboardApp", "format_health"]
