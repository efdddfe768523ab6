"""Init file for volume module."""

from cloudctl.controllers.volume.controller import VolumeController, VolumePaneData
from cloudctl.controllers.volume.parsers import StorageParser, VolumeParser

__all__ = ["StorageParser", "VolumeController", "VolumePaneData", "VolumeParser"]
