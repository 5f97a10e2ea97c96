"""Shell history synchronization.

Appends an executed command to the active shell's history file so that it
can be recalled with the up arrow:

- bash: ``~/.bash_history``, one ``command`` per line
- zsh: ``~/.zsh_history``, extended format ``: <epoch>:0;command``, followed
  by a refresh step so a running shell re-reads the file

Any other SHELL value (or none) is a silent no-op.
"""

import os
import subprocess
import time
from enum import Enum
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from .errors import HistoryOpenError, HistoryWriteError, RefreshError, UserLookupError

try:
    import pwd
except ImportError:  # Windows
    pwd = None


class HistoryFamily(Enum):
    """Supported shell history formats."""
    BASH = "bash"
    ZSH = "zsh"

    @property
    def file_name(self) -> str:
        return f".{self.value}_history"


def detect_family(shell: str) -> Optional[HistoryFamily]:
    """Detect the history format from a SHELL value (case-sensitive)."""
    if "bash" in shell:
        return HistoryFamily.BASH
    if "zsh" in shell:
        return HistoryFamily.ZSH
    return None


def resolve_home() -> Path:
    """Resolve the current user's home directory from the user database.

    Raises:
        UserLookupError: If the user cannot be looked up
    """
    try:
        if pwd is not None:
            return Path(pwd.getpwuid(os.getuid()).pw_dir)
        return Path.home()
    except (KeyError, RuntimeError) as e:
        raise UserLookupError(f"Cannot resolve home directory: {e}") from e


def format_bash_entry(command: str) -> str:
    return command + "\n"


def format_zsh_entry(command: str, timestamp: int) -> str:
    return f": {timestamp}:0;{command}\n"


def append_to_history_file(history_file: Path, line: str) -> None:
    """Append one preformatted line, creating the file if needed.

    Raises:
        HistoryOpenError: If the file cannot be opened
        HistoryWriteError: If the write fails
    """
    try:
        handle = open(history_file, "a", encoding="utf-8")
    except OSError as e:
        raise HistoryOpenError(history_file, e) from e

    with handle:
        try:
            handle.write(line)
            handle.flush()
        except (OSError, UnicodeError) as e:
            raise HistoryWriteError(history_file, e) from e


def run_refresh_step(command: Sequence[str]) -> None:
    """Run the zsh refresh step. Blocks until it exits, with no timeout.

    Raises:
        RefreshError: If the command cannot be started or exits non-zero
    """
    try:
        subprocess.run(list(command), check=True)
    except subprocess.CalledProcessError as e:
        raise RefreshError(f"History refresh exited with code {e.returncode}") from e
    except OSError as e:
        raise RefreshError(f"Cannot run history refresh: {e}") from e


def add_to_shell_history(
    command: str,
    refresh_command: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
    clock: Callable[[], float] = time.time,
) -> Optional[HistoryFamily]:
    """Append a command to the current shell's history.

    Args:
        command: Command line to record, e.g. "xc build"
        refresh_command: Command run after a zsh append
        environ: Environment mapping (defaults to os.environ)
        home: Home directory (defaults to the current user's)
        clock: Time source for zsh timestamps

    Returns:
        The history family written to, or None if SHELL is unsupported
    """
    home_dir = home if home is not None else resolve_home()
    env = os.environ if environ is None else environ

    family = detect_family(env.get("SHELL", ""))
    if family is None:
        return None

    history_file = home_dir / family.file_name
    if family == HistoryFamily.BASH:
        append_to_history_file(history_file, format_bash_entry(command))
    else:
        append_to_history_file(history_file, format_zsh_entry(command, int(clock())))
        run_refresh_step(refresh_command)
    return family
