"""Render delegate for picker list rows."""

from typing import Any

from rich.text import Text

from ..config import PickerTheme
from ..models import ListEntry


class ItemDelegate:
    """Renders one list row per call. Stateless apart from its theme."""

    height = 1
    spacing = 0

    def __init__(self, theme: PickerTheme, no_color: bool = False):
        self.theme = theme
        self.no_color = no_color

    def render(self, entry: Any, highlighted: bool) -> Text:
        """Render a list entry.

        Args:
            entry: Entry to render; anything that is not a ListEntry renders empty
            highlighted: Whether the entry is the highlighted row

        Returns:
            Rich Text for the row
        """
        if not isinstance(entry, ListEntry):
            return Text("")

        label = entry.render_label()
        if highlighted:
            style = "" if self.no_color else f"bold {self.theme.highlight_color}"
            return Text(" " * self.theme.selected_indent + self.theme.marker + label, style=style)
        return Text(" " * self.theme.indent + label)
