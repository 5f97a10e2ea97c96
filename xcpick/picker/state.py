"""Selection state machine for the interactive task picker.

States:
- BROWSING: no filter, all items visible (initial)
- FILTERING: filter text non-empty, items whose name contains it are visible
- CHOSEN: enter pressed on a non-empty visible subset (terminal)
- CANCELLED: ctrl+c, q or esc pressed (terminal)

The machine performs no I/O. Keys arrive as names produced by
``xcpick.picker.keys`` ("up", "enter", "ctrl+c", ...) or as single
printable characters.
"""

from enum import Enum, auto
from typing import Optional, Sequence

from ..models import Outcome, OutcomeKind, Task, TaskItem


class PickerState(Enum):
    """State machine states for the task picker."""
    BROWSING = auto()
    FILTERING = auto()
    CHOSEN = auto()
    CANCELLED = auto()


CANCEL_KEYS = frozenset({"ctrl+c", "q", "esc"})


class SelectionState:
    """Ordered, filterable list of task items resolving to one outcome."""

    def __init__(
        self,
        tasks: Sequence[Task],
        page_size: int = 10,
        width: int = 80,
        height: int = 24,
    ):
        self.items: list[TaskItem] = [TaskItem(task) for task in tasks]
        self.page_size = max(1, page_size)
        self.width = width
        self.height = height

        self.filter_text = ""
        self.selected_index = 0
        self.outcome = Outcome.pending()
        self._visible: list[TaskItem] = list(self.items)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> PickerState:
        if self.outcome.kind == OutcomeKind.CHOSEN:
            return PickerState.CHOSEN
        if self.outcome.kind == OutcomeKind.CANCELLED:
            return PickerState.CANCELLED
        if self.filter_text:
            return PickerState.FILTERING
        return PickerState.BROWSING

    @property
    def is_terminated(self) -> bool:
        return self.outcome.is_terminal

    @property
    def visible(self) -> list[TaskItem]:
        """Items matching the current filter, in original order."""
        return list(self._visible)

    @property
    def selected_item(self) -> Optional[TaskItem]:
        """Highlighted item, or None when nothing is visible."""
        if 0 <= self.selected_index < len(self._visible):
            return self._visible[self.selected_index]
        return None

    @property
    def choice(self) -> Optional[Task]:
        """Chosen task, or None unless the session ended with a choice."""
        return self.outcome.task

    @property
    def total_pages(self) -> int:
        if not self._visible:
            return 1
        return (len(self._visible) + self.page_size - 1) // self.page_size

    @property
    def current_page(self) -> int:
        return self.selected_index // self.page_size

    def page_items(self) -> list[tuple[int, TaskItem]]:
        """Visible items on the page holding the highlighted index."""
        start = self.current_page * self.page_size
        end = start + self.page_size
        return list(enumerate(self._visible[start:end], start=start))

    # =========================================================================
    # Transitions
    # =========================================================================

    def handle_key(self, key: str) -> bool:
        """Apply one key event. Returns True once the session has terminated."""
        if self.is_terminated:
            return True

        if key in CANCEL_KEYS:
            self.outcome = Outcome.cancelled()
        elif key == "enter":
            item = self.selected_item
            if item is not None:
                self.outcome = Outcome.chosen(item.task)
        elif key == "up":
            self._move(-1)
        elif key == "down":
            self._move(1)
        elif key == "page_up" or key == "left":
            self._move(-self.page_size)
        elif key == "page_down" or key == "right":
            self._move(self.page_size)
        elif key == "top":
            self.selected_index = 0
        elif key == "bottom":
            self.selected_index = max(0, len(self._visible) - 1)
        elif key == "backspace":
            if self.filter_text:
                self.set_filter(self.filter_text[:-1])
        elif len(key) == 1 and key.isprintable():
            self.set_filter(self.filter_text + key)

        return self.is_terminated

    def set_filter(self, text: str) -> None:
        """Replace the filter text and recompute the visible subset.

        The highlighted item stays highlighted if it is still visible,
        otherwise the index is clamped into the new subset.
        """
        if self.is_terminated:
            return

        previous = self.selected_item
        self.filter_text = text
        self._visible = [item for item in self.items if text in item.filter_value()]

        if previous is not None and previous in self._visible:
            self.selected_index = self._visible.index(previous)
        else:
            self._clamp()

    def resize(self, width: int, height: int) -> None:
        """Record new terminal dimensions, used to fit rendered rows.

        Does not affect the selection or the outcome.
        """
        self.width = width
        self.height = height

    def _move(self, delta: int) -> None:
        self.selected_index += delta
        self._clamp()

    def _clamp(self) -> None:
        self.selected_index = max(0, min(self.selected_index, len(self._visible) - 1))
