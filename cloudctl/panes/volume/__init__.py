"""Volume pane."""

from cloudctl.panes.volume.pane import VolumePane

__all__ = ["VolumePane"]
