"""Init file for cluster module."""

from cloudctl.controllers.cluster.controller import ClusterController
from cloudctl.controllers.cluster.parsers import ClusterParser

__all__ = ["ClusterController", "ClusterParser"]
