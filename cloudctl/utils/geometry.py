"""Terminal rectangle arithmetic used by the dashboard layout."""

from __future__ import annotations

from typing import NamedTuple


class Rect(NamedTuple):
    """A screen rectangle given by its corners; x2/y2 are exclusive."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return max(0, self.x2 - self.x1)

    @property
    def height(self) -> int:
        return max(0, self.y2 - self.y1)
