"""Utility functions and classes for the cloudctl dashboard."""

from cloudctl.utils.duration import parse_duration
from cloudctl.utils.geometry import Rect
from cloudctl.utils.humanize import humanize_size
from cloudctl.utils.render_guard import RenderGuard

__all__ = [
    "Rect",
    "RenderGuard",
    "humanize_size",
    "parse_duration",
]
