"""App-level keyboard bindings.

This module contains Textual Binding objects for the dashboard app.
"""

from textual.binding import Binding

from cloudctl.constants.limits import MAX_TABS

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("q", "quit", "Quit", priority=True),
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
]

# ============================================================================
# Tab switching - digit N selects tab N
# ============================================================================

TAB_BINDINGS: list[Binding] = [
    Binding(str(number), f"switch_tab({number})", f"Tab {number}", show=False)
    for number in range(1, MAX_TABS + 1)
]

__all__ = [
    "APP_BINDINGS",
    "TAB_BINDINGS",
]
