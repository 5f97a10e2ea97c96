"""Task runner contract and a bash-backed implementation."""

import os
import platform
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Protocol, Sequence

from .errors import CatalogError, TaskFailedError, TaskNotFoundError
from .models import Task


@dataclass
class RunContext:
    """Context a task executes in."""

    working_dir: Path
    env: dict[str, str] = field(default_factory=lambda: os.environ.copy())


class TaskRunner(Protocol):
    """Executes catalog tasks by name."""

    def run(self, context: RunContext, task_name: str, args: Optional[Sequence[str]] = None) -> None:
        """Run a task, raising TaskExecutionError on failure."""
        ...


def get_bash_command() -> str:
    """Find the bash executable.

    On Windows, prefers Git Bash over WSL bash.
    """
    if platform.system() != "Windows":
        return "bash"
    for path in (r"C:\Program Files\Git\bin\bash.exe", r"C:\Program Files (x86)\Git\bin\bash.exe"):
        if Path(path).exists():
            return path
    return shutil.which("bash.exe") or "bash.exe"


class ShellTaskRunner:
    """Runs task scripts with bash."""

    def __init__(self, tasks: dict[str, Task], working_dir: Path):
        self.tasks = tasks
        self.working_dir = working_dir

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task], working_dir: Path) -> "ShellTaskRunner":
        """Build a runner from a task catalog.

        Raises:
            CatalogError: On duplicate task names or tasks without a script
        """
        by_name: dict[str, Task] = {}
        for task in tasks:
            if task.name in by_name:
                raise CatalogError(f"Duplicate task '{task.name}'")
            if not task.script.strip():
                raise CatalogError(f"Task '{task.name}' has no script")
            by_name[task.name] = task
        return cls(by_name, working_dir)

    def get_execution_command(self, task: Task, args: Sequence[str]) -> list[str]:
        """Get the command that runs a task's script with positional args."""
        return [get_bash_command(), "-c", task.script, task.name, *args]

    def run(self, context: RunContext, task_name: str, args: Optional[Sequence[str]] = None) -> None:
        task = self.tasks.get(task_name)
        if task is None:
            raise TaskNotFoundError(task_name)

        exec_cmd = self.get_execution_command(task, args or [])
        result = subprocess.run(
            exec_cmd,
            cwd=str(context.working_dir),
            env=context.env,
        )
        if result.returncode != 0:
            raise TaskFailedError(task_name, result.returncode)
