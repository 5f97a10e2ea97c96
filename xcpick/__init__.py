"""xcpick - interactive task picker with shell history sync."""

__version__ = "0.1.0"

from .config import PickerConfig, PickerTheme
from .controller import pick_and_run, run_picker
from .errors import (
    CatalogError,
    HistorySyncError,
    SessionError,
    TaskExecutionError,
    XcPickError,
)
from .history import add_to_shell_history
from .models import Task, TaskItem
from .runner import RunContext, ShellTaskRunner, TaskRunner

__all__ = [
    "CatalogError",
    "HistorySyncError",
    "PickerConfig",
    "PickerTheme",
    "RunContext",
    "SessionError",
    "ShellTaskRunner",
    "Task",
    "TaskExecutionError",
    "TaskItem",
    "TaskRunner",
    "XcPickError",
    "add_to_shell_history",
    "pick_and_run",
    "run_picker",
]
