"""Cluster pane."""

from cloudctl.panes.cluster.pane import ClusterPane

__all__ = ["ClusterPane"]
