"""Tab set - ordered panes plus the index of the visible one."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from cloudctl.controllers import ClusterController, CloudAPI, VolumeController
from cloudctl.models.config import ConfigError, DashboardConfig
from cloudctl.panes.base_pane import DashboardPane
from cloudctl.panes.cluster import ClusterPane
from cloudctl.panes.volume import VolumePane
from cloudctl.themes import DashboardTheme


class TabSet:
    """Ordered, non-empty pane collection with one active pane.

    Only the dashboard app changes the active index; panes never do.
    """

    def __init__(self, panes: Sequence[DashboardPane]) -> None:
        if not panes:
            raise ConfigError("dashboard needs at least one pane")
        self._panes = list(panes)
        self._active_index = 0

    def __iter__(self) -> Iterator[DashboardPane]:
        return iter(self._panes)

    def __len__(self) -> int:
        return len(self._panes)

    @property
    def names(self) -> list[str]:
        """Tab names in display order."""
        return [pane.tab_name for pane in self._panes]

    @property
    def active_index(self) -> int:
        """Index of the visible pane."""
        return self._active_index

    @property
    def active(self) -> DashboardPane:
        """The visible pane."""
        return self._panes[self._active_index]

    def find_index_by_name(self, name: str) -> int:
        """Return the index of the tab called ``name``, ignoring case.

        Raises:
            ConfigError: If no tab has that name.
        """
        wanted = name.lower()
        for index, pane in enumerate(self._panes):
            if pane.tab_name.lower() == wanted:
                return index
        raise ConfigError(f"tab with name {name!r} not found")

    def select(self, index: int) -> bool:
        """Make the pane at ``index`` active.

        Returns:
            False if ``index`` is out of range; the active pane is unchanged.
        """
        if not 0 <= index < len(self._panes):
            return False
        self._active_index = index
        return True


def build_panes(
    client: CloudAPI, config: DashboardConfig, theme: DashboardTheme
) -> list[DashboardPane]:
    """Create the dashboard panes in tab order."""
    cluster_controller = ClusterController(
        client, config.filters, request_timeout=config.request_timeout
    )
    volume_controller = VolumeController(
        client, config.filters, request_timeout=config.request_timeout
    )
    return [
        ClusterPane(cluster_controller, theme=theme),
        VolumePane(volume_controller, theme=theme),
    ]
