"""
Console output and interactive input.

Status lines are colored and emoji-prefixed for humans. Both can be turned
off, in which case plain ASCII markers are used instead.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO

# ANSI color codes
GREEN = "32"
YELLOW = "33"
BLUE = "34"
RED = "31"

SYMBOLS = {
    "success": "✅",
    "warning": "⚠️",
    "error": "❌⚠️",
    "search": "🔍",
    "upgrade": "⬆️",
    "cleanup": "🧹",
    "skip": "🚀",
}

PLAIN_SYMBOLS = {
    "success": "[ok]",
    "warning": "[!]",
    "error": "[x]",
    "search": "[..]",
    "upgrade": "[^]",
    "cleanup": "[-]",
    "skip": "[>]",
}


class Console:
    """
    Writes status lines to the terminal.

    Attributes:
        stream: Destination for regular output (default: stdout)
        err_stream: Destination for error output (default: stderr)
        use_color: Wrap lines in ANSI color codes
        use_emoji: Prefix lines with emoji instead of ASCII markers
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
        use_color: bool = True,
        use_emoji: bool = True,
    ):
        self._stream = stream
        self._err_stream = err_stream
        self.use_color = use_color
        self.use_emoji = use_emoji

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self._err_stream if self._err_stream is not None else sys.stderr

    def symbol(self, key: str) -> str:
        return (SYMBOLS if self.use_emoji else PLAIN_SYMBOLS)[key]

    def colorize(self, text: str, color: str, bold: bool = False) -> str:
        if not self.use_color or not text:
            return text
        code = f"1;{color}" if bold else color
        return f"\033[{code}m{text}\033[0m"

    def _write(self, text: str, err: bool = False) -> None:
        stream = self.err_stream if err else self.stream
        print(text, file=stream, flush=True)

    def _status(self, key: str, text: str, color: str, bold: bool = False, err: bool = False) -> None:
        self._write(self.colorize(f"{self.symbol(key)}  {text}", color, bold), err=err)

    def success(self, text: str, bold: bool = False) -> None:
        self._status("success", text, GREEN, bold)

    def warning(self, text: str, bold: bool = False) -> None:
        self._status("warning", text, YELLOW, bold)

    def error(self, text: str) -> None:
        self._status("error", text, RED, err=True)

    def step(self, key: str, text: str, bold: bool = True) -> None:
        """Progress line for the updater (search/upgrade/cleanup/skip)."""
        color = YELLOW if key == "skip" else BLUE
        self._status(key, text, color, bold)

    def hint(self, text: str) -> None:
        """Indented follow-up line under a status line."""
        self._write(self.colorize(f"   {text}", BLUE))

    def plain(self, text: str) -> None:
        self._write(text)


class InputReader:
    """Reads a single-character answer from the interactive input stream."""

    def __init__(self, stream: BinaryIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        return self._stream if self._stream is not None else sys.stdin.buffer

    def read_char(self) -> str:
        """
        Block until one byte is available and return it trimmed and lower-cased.

        Returns:
            The answer character, or "" on end of input or whitespace
        """
        data = self.stream.read(1)
        return data.decode("utf-8", errors="ignore").strip().lower()
