"""Keyboard bindings for the cloudctl dashboard."""

from cloudctl.keyboard.app import APP_BINDINGS, TAB_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "TAB_BINDINGS",
]
