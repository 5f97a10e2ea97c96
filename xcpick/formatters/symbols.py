"""Symbols with emoji/ASCII fallbacks for picker messages."""

import platform
import sys
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, TextIO


@dataclass(frozen=True)
class Symbol:
    """A symbol with emoji and ASCII fallback."""

    emoji: str
    ascii: str


class Symbols:
    """Symbol definitions as class attributes."""

    Warning = Symbol("⚠️", "!")


class SymbolsFormatter:
    """Resolves symbols to emoji or ASCII depending on terminal support.

    Emoji is disabled when no_color=True or when the terminal doesn't support it.
    """

    def __init__(self, no_color: bool = False, stream: Optional[TextIO] = None):
        """Initialize the symbols formatter.

        Args:
            no_color: If True, always use ASCII symbols instead of emoji
            stream: Stream the symbols are written to (defaults to stdout)
        """
        self._no_color = no_color
        self._stream = stream

    @cached_property
    def supports_emoji(self) -> bool:
        """Detect if terminal supports emoji display."""
        if self._no_color:
            return False

        if platform.system() == "Windows":
            return False

        stream = self._stream if self._stream is not None else sys.stdout
        encoding = getattr(stream, "encoding", None)
        if not encoding:
            return False

        encoding = encoding.lower()
        return any(enc in encoding for enc in ('utf-8', 'utf8', 'utf-16', 'utf16'))

    def get(self, symbol: Symbol) -> str:
        return symbol.emoji if self.supports_emoji else symbol.ascii

    @property
    def Warning(self) -> str:
        return self.get(Symbols.Warning)

