"""Raw terminal key input, decoded into key names.

Named keys: up, down, left, right, page_up, page_down, top, bottom, enter,
esc, ctrl+c, backspace. Printable characters are returned as-is.

Bytes read from the terminal are buffered, so several keys arriving in one
read (key repeat, fast typing) are returned one per call.
"""

import codecs
import os
import sys
import time
from typing import Any, Optional, TextIO

from ..errors import SessionError

# Cross-platform terminal handling
IS_WINDOWS = sys.platform == "win32"

if IS_WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty


ESC = 0x1B

# Seconds to wait for the rest of an escape or UTF-8 sequence
SEQUENCE_TIMEOUT = 0.05

CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\x03": "ctrl+c",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
}

WINDOWS_SCAN_CODES = {
    "H": "up",
    "P": "down",
    "K": "left",
    "M": "right",
    "I": "page_up",
    "Q": "page_down",
    "G": "top",
    "O": "bottom",
}


def decode_char(ch: str) -> str:
    """Decode a single character into a key name ("" if unsupported)."""
    if ch in CONTROL_KEYS:
        return CONTROL_KEYS[ch]
    if len(ch) == 1 and ch.isprintable():
        return ch
    return ""


def decode_escape(seq: str) -> str:
    """Decode the bytes following ESC. An empty sequence is a bare esc."""
    if not seq:
        return "esc"
    if seq.startswith("[A") or seq == "OA":
        return "up"
    if seq.startswith("[B") or seq == "OB":
        return "down"
    if seq.startswith("[C") or seq == "OC":
        return "right"
    if seq.startswith("[D") or seq == "OD":
        return "left"
    if seq.startswith("[5~"):
        return "page_up"
    if seq.startswith("[6~"):
        return "page_down"
    if seq.startswith("[H") or seq.startswith("[1~") or seq == "OH":
        return "top"
    if seq.startswith("[F") or seq.startswith("[4~") or seq == "OF":
        return "bottom"
    return ""


def _parse_escape(data: bytes, final: bool) -> tuple[Optional[str], int]:
    if len(data) == 1:
        return ("esc", 1) if final else (None, 0)

    introducer = data[1:2]
    if introducer == b"O":
        if len(data) < 3:
            return ("", len(data)) if final else (None, 0)
        return decode_escape(data[1:3].decode("ascii", errors="replace")), 3

    if introducer == b"[":
        # CSI: parameter/intermediate bytes, then one final byte in @..~
        for end in range(2, len(data)):
            if 0x40 <= data[end] <= 0x7E:
                return decode_escape(data[1:end + 1].decode("ascii", errors="replace")), end + 1
        return ("", len(data)) if final else (None, 0)

    # ESC followed by an ordinary key: the ESC stands alone
    return "esc", 1


def parse_key(data: bytes, final: bool = False) -> tuple[Optional[str], int]:
    """Parse one key from the front of a byte buffer.

    Args:
        data: Buffered terminal input (non-empty)
        final: No more bytes are coming, so incomplete input is resolved now

    Returns:
        (key, consumed). key is None when more bytes are needed; "" when the
        consumed bytes are not a supported key.
    """
    if data[0] == ESC:
        return _parse_escape(data, final)

    decoder = codecs.getincrementaldecoder("utf-8")()
    for index in range(len(data)):
        try:
            ch = decoder.decode(data[index:index + 1])
        except UnicodeDecodeError:
            return "", index + 1
        if ch:
            return decode_char(ch), index + 1
    return ("", len(data)) if final else (None, 0)


class KeyReader:
    """Reads key presses from a terminal in cbreak mode."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._old_terminal_settings: Optional[list[Any]] = None
        self._pending = bytearray()

    def setup(self) -> None:
        """Put the terminal into cbreak mode with signal keys disabled.

        Raises:
            SessionError: If the stream is not an interactive terminal
        """
        if not self.stream.isatty():
            raise SessionError("Interactive picker requires a terminal on stdin")
        if IS_WINDOWS:
            return
        try:
            fd = self.stream.fileno()
            self._old_terminal_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            # ctrl+c must reach the picker as a key, not SIGINT
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        except (termios.error, AttributeError, ValueError) as e:
            raise SessionError(f"Cannot configure terminal: {e}") from e

    def restore(self) -> None:
        """Restore the terminal settings saved by setup()."""
        if not IS_WINDOWS and self._old_terminal_settings:
            try:
                termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._old_terminal_settings)
            except (termios.error, ValueError):
                pass
            self._old_terminal_settings = None

    def read_key(self, timeout: float = 0.1) -> str:
        """Wait up to ``timeout`` seconds for a key. Returns "" on timeout."""
        if IS_WINDOWS:
            return self._read_key_windows(timeout)
        return self._read_key_unix(timeout)

    def _read_key_windows(self, timeout: float) -> str:
        deadline = time.time() + timeout
        while not msvcrt.kbhit():
            if time.time() >= deadline:
                return ""
            time.sleep(0.01)

        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return WINDOWS_SCAN_CODES.get(msvcrt.getwch(), "")
        return decode_char(ch)

    def _wait_readable(self, timeout: float) -> bool:
        ready, _, _ = select.select([self.stream], [], [], timeout)
        return bool(ready)

    def _read_key_unix(self, timeout: float) -> str:
        fd = self.stream.fileno()
        if not self._pending:
            if not self._wait_readable(timeout):
                return ""
            self._pending += os.read(fd, 64)
            if not self._pending:
                return ""

        while True:
            key, consumed = parse_key(bytes(self._pending))
            if key is None:
                chunk = os.read(fd, 64) if self._wait_readable(SEQUENCE_TIMEOUT) else b""
                if chunk:
                    self._pending += chunk
                    continue
                key, consumed = parse_key(bytes(self._pending), final=True)
            del self._pending[:consumed]
            return key
