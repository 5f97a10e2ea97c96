"""Model classes for the task picker."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Task:
    """A named unit of work from the task catalog."""

    name: str
    """Task name, used as the invocation argument and the filter key"""

    script: str = ""
    """Executable body, opaque to the picker and consumed by the runner"""

    description: str = ""

    def __str__(self) -> str:
        return self.name


@runtime_checkable
class ListEntry(Protocol):
    """Capability shared by every entry the picker list can hold."""

    def filter_value(self) -> str:
        """Text matched against the filter."""
        ...

    def render_label(self) -> str:
        """Text shown for the entry."""
        ...


class TaskItem:
    """Display wrapper around a task.

    Holds a reference to the original ``Task`` rather than a copy, so the
    chosen item can be handed back to the caller as-is.
    """

    __slots__ = ("_task",)

    def __init__(self, task: Task):
        self._task = task

    @property
    def task(self) -> Task:
        return self._task

    @property
    def name(self) -> str:
        return self._task.name

    def filter_value(self) -> str:
        return self._task.name

    def render_label(self) -> str:
        return self._task.name

    def __repr__(self) -> str:
        return f"TaskItem({self._task.name!r})"


class OutcomeKind(Enum):
    """Terminal outcome of a selection session."""

    PENDING = "pending"
    CHOSEN = "chosen"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Outcome:
    """Outcome of a selection session, set at most once."""

    kind: OutcomeKind
    task: Optional[Task] = None

    @classmethod
    def pending(cls) -> "Outcome":
        return cls(kind=OutcomeKind.PENDING)

    @classmethod
    def chosen(cls, task: Task) -> "Outcome":
        return cls(kind=OutcomeKind.CHOSEN, task=task)

    @classmethod
    def cancelled(cls) -> "Outcome":
        return cls(kind=OutcomeKind.CANCELLED)

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.PENDING
