"""Exception types raised by the picker, runner and history synchronizer."""

from pathlib import Path
from typing import Optional


class XcPickError(Exception):
    """Base class for all picker errors."""


class SessionError(XcPickError):
    """Raised when the interactive terminal session cannot be established."""


class CatalogError(XcPickError):
    """Raised when a runner cannot be built from the task catalog."""


class TaskExecutionError(XcPickError):
    """Raised when a chosen task fails to execute."""

    def __init__(self, task_name: str, message: str):
        super().__init__(message)
        self.task_name = task_name


class TaskNotFoundError(TaskExecutionError):
    """Raised when the runner has no task with the requested name."""

    def __init__(self, task_name: str):
        super().__init__(task_name, f"Task '{task_name}' not found")


class TaskFailedError(TaskExecutionError):
    """Raised when a task script exits with a non-zero status."""

    def __init__(self, task_name: str, exit_code: int):
        super().__init__(task_name, f"Task '{task_name}' exited with code {exit_code}")
        self.exit_code = exit_code


class HistorySyncError(XcPickError):
    """Raised when an executed command cannot be added to shell history."""


class UserLookupError(HistorySyncError):
    """Raised when the current user's home directory cannot be resolved."""


class HistoryOpenError(HistorySyncError):
    """Raised when the history file cannot be opened for appending."""

    def __init__(self, path: Path, cause: Optional[OSError] = None):
        super().__init__(f"Cannot open history file {path}: {cause}")
        self.path = path


class HistoryWriteError(HistorySyncError):
    """Raised when writing to an opened history file fails."""

    def __init__(self, path: Path, cause: Optional[Exception] = None):
        super().__init__(f"Cannot write to history file {path}: {cause}")
        self.path = path


class RefreshError(HistorySyncError):
    """Raised when the shell history refresh step fails."""
