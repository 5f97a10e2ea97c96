"""Picker configuration values.

Styling and behaviour are passed explicitly to the delegate and controller
instead of living in module-level style objects.
"""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

REFRESH_SCRIPT = Path(__file__).parent / "scripts" / "refresh_history.zsh"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class PickerTheme:
    """Visual options for the task list."""

    title: str = "xc: Choose a task"
    title_margin: int = 2
    indent: int = 4
    """Spacing before the label of a regular row"""

    selected_indent: int = 2
    """Spacing before the marker of the highlighted row"""

    marker: str = "> "
    highlight_color: str = "orchid"
    """Rich colour for the highlighted row (ANSI 256 colour 170)"""

    filter_color: str = "cyan"
    dim_style: str = "dim"


@dataclass(frozen=True)
class PickerConfig:
    """Behavioural options for a picker session."""

    program_name: str = "xc"
    theme: PickerTheme = field(default_factory=PickerTheme)
    no_color: bool = False
    page_size: int = 10
    sync_history: bool = True
    strict_history: bool = False
    """Raise history synchronization errors instead of warning"""

    refresh_command: Optional[tuple[str, ...]] = None

    def resolved_refresh_command(self) -> list[str]:
        """Get the zsh refresh command, defaulting to the bundled script."""
        if self.refresh_command:
            return list(self.refresh_command)
        return ["zsh", str(REFRESH_SCRIPT)]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "PickerConfig":
        """Build a config from environment variables.

        Recognized variables:
            NO_COLOR: any value disables colours
            XCPICK_STRICT_HISTORY: 1/true/yes makes history errors fatal
            XCPICK_REFRESH_COMMAND: command line for the zsh refresh step

        Args:
            environ: Environment mapping (defaults to os.environ)
            **overrides: Explicit field values, taking precedence

        Returns:
            PickerConfig instance
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        if "NO_COLOR" in env:
            values["no_color"] = True
        strict = env.get("XCPICK_STRICT_HISTORY", "")
        if strict:
            values["strict_history"] = strict.strip().lower() in _TRUE_VALUES
        refresh = env.get("XCPICK_REFRESH_COMMAND", "").strip()
        if refresh:
            values["refresh_command"] = tuple(shlex.split(refresh))
        values.update(overrides)
        return cls(**values)
