"""Display widgets for the dashboard.

- CustomGauge: Percentage gauge
- CustomParagraph: Bordered text paragraph
"""

from cloudctl.widgets.display.custom_gauge import CustomGauge
from cloudctl.widgets.display.custom_paragraph import CustomParagraph

__all__ = [
    "CustomGauge",
    "CustomParagraph",
]
