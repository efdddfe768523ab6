"""Cluster parsers."""

from cloudctl.controllers.cluster.parsers.cluster_parser import ClusterParser

__all__ = ["ClusterParser"]
