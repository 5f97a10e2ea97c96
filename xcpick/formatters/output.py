"""Output formatter - the entry point for user-visible picker messages.

Task reports go to stdout verbatim; warnings go through a Rich console on
stderr, which handles no_color mode.

Usage:
    output = OutputFormatter(no_color=False)
    output.print_task_name("build")
    output.print_warning("Could not update shell history")
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from .symbols import SymbolsFormatter


class OutputFormatter:
    """Central formatter for picker messages."""

    def __init__(self, no_color: bool = False, err_console: Optional[Console] = None):
        """Initialize the output formatter.

        Args:
            no_color: If True, disable all colors and styling in output
            err_console: Console for warnings (created when omitted)
        """
        self._err_console = err_console or Console(
            no_color=no_color,
            stderr=True,
            highlight=False,
        )
        self._symbols = SymbolsFormatter(no_color=no_color, stream=self._err_console.file)

    def print_raw(self, message: str) -> None:
        """Print message without any Rich processing."""
        print(message)

    def print_task_name(self, name: str) -> None:
        """Report the task that was run, on stdout."""
        self.print_raw(f"Task name: {name}")

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        line = Text()
        line.append(f"{self._symbols.Warning} ", style="yellow")
        line.append("Warning: ", style="bold yellow")
        line.append(message)
        self._err_console.print(line, highlight=False)
