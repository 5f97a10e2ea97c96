"""Tests for user-visible output."""

import io

from rich.console import Console

from xcpick.formatters import OutputFormatter, Symbols, SymbolsFormatter


def test_task_name_goes_to_stdout(capsys):
    OutputFormatter(no_color=True).print_task_name("build")
    captured = capsys.readouterr()
    assert captured.out == "Task name: build\n"
    assert captured.err == ""


def test_warning_goes_to_error_console():
    err = io.StringIO()
    output = OutputFormatter(no_color=True, err_console=Console(file=err, no_color=True, width=200))
    output.print_warning("history file is read-only")
    assert err.getvalue() == "! Warning: history file is read-only\n"


def test_no_color_uses_ascii_symbols():
    symbols = SymbolsFormatter(no_color=True)
    assert symbols.supports_emoji is False
    assert symbols.Warning == Symbols.Warning.ascii


class FakeStream:
    """Write-only stream with a fixed encoding."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        self.written: list[str] = []

    def write(self, data: str) -> int:
        self.written.append(data)
        return len(data)

    def flush(self) -> None:
        pass


def test_emoji_support_follows_target_stream(monkeypatch):
    monkeypatch.setattr("sys.stdout", FakeStream("utf-8"))
    assert SymbolsFormatter(stream=FakeStream("ascii")).supports_emoji is False


def test_warning_symbol_matches_error_console_encoding(monkeypatch):
    monkeypatch.setattr("sys.stdout", FakeStream("utf-8"))
    err = FakeStream("ascii")
    output = OutputFormatter(err_console=Console(file=err, no_color=True, width=200))

    output.print_warning("history file is read-only")

    assert "".join(err.written).startswith("! Warning:")
