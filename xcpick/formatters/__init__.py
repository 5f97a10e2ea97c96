"""Formatters package for picker output.

The main entry point is `OutputFormatter`, which owns the Rich console and
the emoji/ASCII symbol resolver.
"""

from .output import OutputFormatter
from .symbols import Symbols, SymbolsFormatter

__all__ = [
    "OutputFormatter",
    "Symbols",
    "SymbolsFormatter",
]
