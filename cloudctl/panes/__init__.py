"""Dashboard panes.

A pane owns a rectangle of the dashboard, fetches its own data and draws its
own widgets:
- ClusterPane: cluster operation and condition health
- VolumePane: volume health and, for provider admins, storage cluster health
"""

from cloudctl.panes.base_pane import DashboardPane
from cloudctl.panes.cluster import ClusterPane
from cloudctl.panes.tab_set import TabSet, build_panes
from cloudctl.panes.volume import VolumePane

__all__ = [
    "ClusterPane",
    "DashboardPane",
    "TabSet",
    "VolumePane",
    "build_panes",
]
