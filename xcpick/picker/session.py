"""Terminal session driving the selection state machine.

Layout: Title | Filter | Rows | Pagination | Footer

The loop is single-threaded: read one key, apply it, redraw. Terminal
size is polled between reads and forwarded to the state as a resize.
"""

import os
from typing import Optional

from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from ..config import PickerTheme
from ..models import Outcome
from .delegate import ItemDelegate
from .keys import IS_WINDOWS, KeyReader
from .state import PickerState, SelectionState

FOOTER_KEYS = "↑/↓ navigate | ←/→ page | type to filter | enter run | q/esc quit"
FOOTER_KEYS_ASCII = "Arrows navigate | type to filter | enter run | q/esc quit"


def get_terminal_size() -> tuple[int, int]:
    """Get terminal width and height."""
    try:
        size = os.get_terminal_size()
        return (size.columns, size.lines)
    except OSError:
        return (80, 24)


def build_view(state: SelectionState, delegate: ItemDelegate, theme: PickerTheme) -> Group:
    """Build the renderable for the current selection state, fitted to state.width."""
    no_color = delegate.no_color
    dim_style = "" if no_color else theme.dim_style
    title_style = "" if no_color else "bold"

    parts: list = [Text(""), Text(" " * theme.title_margin + theme.title, style=title_style)]

    if state.state == PickerState.FILTERING:
        line = Text(" " * theme.title_margin)
        line.append("Filter: ", style=dim_style)
        line.append(state.filter_text, style="" if no_color else theme.filter_color)
        parts.append(line)
    parts.append(Text(""))

    rows = state.page_items()
    if rows:
        for index, item in rows:
            parts.append(delegate.render(item, index == state.selected_index))
    else:
        parts.append(Text(" " * theme.indent + "No items.", style=dim_style))

    if state.total_pages > 1:
        parts.append(Text(""))
        parts.append(Text(
            " " * theme.indent + f"page {state.current_page + 1}/{state.total_pages}",
            style=dim_style,
        ))

    parts.append(Text(""))
    footer = FOOTER_KEYS_ASCII if IS_WINDOWS or no_color else FOOTER_KEYS
    parts.append(Text(" " * theme.indent + footer, style=dim_style))

    # Rows never wrap: anything wider than the terminal is cut with an ellipsis
    for part in parts:
        part.truncate(max(1, state.width), overflow="ellipsis")
    return Group(*parts)


class PickerSession:
    """Runs one interactive selection to completion."""

    def __init__(
        self,
        state: SelectionState,
        delegate: ItemDelegate,
        theme: PickerTheme,
        console: Optional[Console] = None,
        key_reader: Optional[KeyReader] = None,
    ):
        self.state = state
        self.delegate = delegate
        self.theme = theme
        self.console = console or Console(no_color=delegate.no_color, highlight=False)
        self.key_reader = key_reader or KeyReader()
        self._size: Optional[tuple[int, int]] = None

    def _check_resize(self) -> bool:
        size = get_terminal_size()
        if size == self._size:
            return False
        self._size = size
        self.state.resize(*size)
        return True

    def run(self) -> Outcome:
        """Run the read-dispatch-render loop until the state terminates.

        Raises:
            SessionError: If the terminal cannot be put into cbreak mode
        """
        self.key_reader.setup()
        try:
            self._check_resize()
            with Live(
                build_view(self.state, self.delegate, self.theme),
                console=self.console,
                auto_refresh=False,
                transient=True,
                vertical_overflow="visible",
            ) as live:
                while not self.state.is_terminated:
                    key = self.key_reader.read_key()
                    changed = self._check_resize()
                    if key:
                        self.state.handle_key(key)
                        changed = True
                    if changed and not self.state.is_terminated:
                        live.update(build_view(self.state, self.delegate, self.theme), refresh=True)
        finally:
            self.key_reader.restore()
        return self.state.outcome
