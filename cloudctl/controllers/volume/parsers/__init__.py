"""Volume and storage cluster parsers."""

from cloudctl.controllers.volume.parsers.storage_parser import StorageParser
from cloudctl.controllers.volume.parsers.volume_parser import VolumeParser

__all__ = ["StorageParser", "VolumeParser"]
