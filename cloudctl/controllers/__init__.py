"""Controllers module for the cloudctl dashboard.

This module provides domain-driven controllers that fetch cloud API data
under a deadline and reduce it into per-pane summaries.
"""

from __future__ import annotations

# Base classes
from cloudctl.controllers.base import BaseController, CloudAPI

# Cluster domain
from cloudctl.controllers.cluster.controller import ClusterController
from cloudctl.controllers.cluster.parsers import ClusterParser

# Status domain
from cloudctl.controllers.status.controller import StatusController

# Volume domain
from cloudctl.controllers.volume.controller import VolumeController, VolumePaneData
from cloudctl.controllers.volume.parsers import StorageParser, VolumeParser

__all__ = [
    # Base
    "BaseController",
    "CloudAPI",
    # Domain Controllers
    "ClusterController",
    # Parsers
    "ClusterParser",
    "StatusController",
    "StorageParser",
    "VolumeController",
    "VolumePaneData",
    "VolumeParser",
]
