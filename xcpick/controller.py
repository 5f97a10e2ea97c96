"""Picker controller: choose a task, run it, record it in shell history."""

from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import PickerConfig
from .errors import CatalogError, HistorySyncError, TaskExecutionError, XcPickError
from .formatters import OutputFormatter
from .history import add_to_shell_history
from .models import Outcome, Task
from .picker.delegate import ItemDelegate
from .picker.session import PickerSession
from .picker.state import SelectionState
from .runner import RunContext, ShellTaskRunner, TaskRunner

SessionFactory = Callable[[SelectionState, ItemDelegate, PickerConfig], Callable[[], Outcome]]
RunnerFactory = Callable[[Sequence[Task], Path], TaskRunner]


def default_session_factory(
    state: SelectionState, delegate: ItemDelegate, config: PickerConfig
) -> Callable[[], Outcome]:
    return PickerSession(state, delegate, config.theme).run


def run_picker(
    tasks: Sequence[Task],
    config: Optional[PickerConfig] = None,
    session_factory: Optional[SessionFactory] = None,
) -> Optional[Task]:
    """Let the user choose one task interactively.

    Args:
        tasks: Tasks to choose from
        config: Picker configuration
        session_factory: Builds the interactive loop (terminal session by default)

    Returns:
        The chosen task, or None on cancellation or an empty list

    Raises:
        SessionError: If the terminal session cannot be established
    """
    if not tasks:
        return None

    config = config or PickerConfig()
    factory = session_factory or default_session_factory
    state = SelectionState(tasks, page_size=config.page_size)
    delegate = ItemDelegate(config.theme, no_color=config.no_color)

    outcome = factory(state, delegate, config)()
    return outcome.task


def sync_history(command: str, config: PickerConfig, output: OutputFormatter) -> None:
    """Record a command in shell history, warning on failure unless strict."""
    try:
        add_to_shell_history(command, config.resolved_refresh_command())
    except HistorySyncError as e:
        if config.strict_history:
            raise
        output.print_warning(f"Could not add '{command}' to shell history: {e}")


def pick_and_run(
    tasks: Sequence[Task],
    runner_factory: RunnerFactory = ShellTaskRunner.from_tasks,
    context: Optional[RunContext] = None,
    config: Optional[PickerConfig] = None,
    output: Optional[OutputFormatter] = None,
    session_factory: Optional[SessionFactory] = None,
) -> Optional[Task]:
    """Pick a task, run it, and make the choice replayable from shell history.

    Returns:
        The task that ran, or None if nothing was chosen

    Raises:
        SessionError: If the terminal session cannot be established
        CatalogError: If the runner cannot be built from the tasks
        TaskExecutionError: If the chosen task fails
        HistorySyncError: Only with strict_history enabled
    """
    config = config or PickerConfig()
    output = output or OutputFormatter(no_color=config.no_color)
    context = context or RunContext(working_dir=Path.cwd())

    task = run_picker(tasks, config, session_factory)
    if task is None:
        return None

    try:
        runner = runner_factory(tasks, context.working_dir)
    except (XcPickError, ValueError) as e:
        raise CatalogError(f"{config.program_name} parse error: {e}") from e

    try:
        runner.run(context, task.name, None)
    except TaskExecutionError as e:
        raise TaskExecutionError(task.name, f"{config.program_name}: {e}") from e
    except Exception as e:
        raise TaskExecutionError(task.name, f"{config.program_name}: task '{task.name}' failed: {e}") from e
    output.print_task_name(task.name)

    if config.sync_history:
        sync_history(f"{config.program_name} {task.name}", config, output)
    return task
