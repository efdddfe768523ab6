"""CustomParagraph widget - bordered, non-wrapping text block.

CSS Classes: widget-custom-paragraph
"""

from __future__ import annotations

from textual.widgets import Static

from cloudctl.themes import DEFAULT_THEME, DashboardTheme


class CustomParagraph(Static):
    """Static text with a border title and theme text style."""

    DEFAULT_CSS = """
    CustomParagraph {
        height: 3;
        width: 1fr;
        border: round $surface-lighten-2;
        border-title-align: left;
    }
    """

    def __init__(
        self,
        text: str = "",
        *,
        title: str = "",
        theme: DashboardTheme = DEFAULT_THEME,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(text, id=id, classes=classes, markup=True)
        self.add_class("widget-custom-paragraph")
        self.border_title = title or None
        self.dashboard_theme = theme
        self.paragraph_text = text
        self.styles.color = theme.text

    def on_mount(self) -> None:
        """Show text set before the widget was mounted."""
        self.update(self.paragraph_text)

    def set_text(self, text: str) -> None:
        """Replace the paragraph text.

        Args:
            text: Text with optional Rich markup.
        """
        self.paragraph_text = text
        if self.is_mounted:
            self.update(text)
