"""Dashboard color themes.

A theme is a value object built once at startup and handed to every widget;
widgets never consult global style state.
"""

from __future__ import annotations

from dataclasses import dataclass

from cloudctl.constants.enums import ThemeName
from cloudctl.models.config import ConfigError


@dataclass(frozen=True)
class DashboardTheme:
    """Styles shared by all dashboard widgets.

    Attributes:
        name: Theme name as given on the command line.
        textual_theme: Registered Textual theme providing the base palette.
        text: Color of paragraph and table text.
        gauge_bar: Default gauge bar color.
        gauge_label: Color of the gauge percentage label.
        tab_text: Color of the tab labels; the active tab is highlighted
            by the Textual theme.
    """

    name: str
    textual_theme: str
    text: str
    gauge_bar: str
    gauge_label: str
    tab_text: str


# bright fonts, optimized for dark terminal backgrounds
DEFAULT_THEME = DashboardTheme(
    name=ThemeName.DEFAULT.value,
    textual_theme="textual-dark",
    text="white",
    gauge_bar="white",
    gauge_label="white",
    tab_text="white",
)

# dark fonts, optimized for bright terminal backgrounds
DARK_THEME = DashboardTheme(
    name=ThemeName.DARK.value,
    textual_theme="textual-light",
    text="black",
    gauge_bar="black",
    gauge_label="black",
    tab_text="black",
)

_THEMES: dict[str, DashboardTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    DARK_THEME.name: DARK_THEME,
}


def resolve_theme(name: str) -> DashboardTheme:
    """Return the theme registered under ``name``.

    Raises:
        ConfigError: If no such theme exists.
    """
    theme = _THEMES.get(name.strip().lower())
    if theme is None:
        raise ConfigError(f"unknown theme: {name}")
    return theme


def theme_names() -> list[str]:
    """Return all registered theme names."""
    return list(_THEMES)


__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "DashboardTheme",
    "resolve_theme",
    "theme_names",
]
