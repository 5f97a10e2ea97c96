"""Interactive task selection: state machine, row delegate and terminal session."""

from .delegate import ItemDelegate
from .session import PickerSession, build_view
from .state import CANCEL_KEYS, PickerState, SelectionState

__all__ = [
    "CANCEL_KEYS",
    "ItemDelegate",
    "PickerSession",
    "PickerState",
    "SelectionState",
    "build_view",
]
