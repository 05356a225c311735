"""
t9line.render
=============
Single-line terminal renderer: redraws the edit line in place and
highlights the selected candidate.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .keypad import ConfigurationError

CLEAR_LINE = "\r\x1b[2K"
RESET = "\x1b[0m"

HIGHLIGHT_STYLES: dict[str, str] = {
    "reverse": "\x1b[7m",
    "underline": "\x1b[4m",
    "bold": "\x1b[1m",
    "none": "",
}


class TerminalRenderer:
    def __init__(self, stream: TextIO | None = None, highlight: str = "reverse") -> None:
        if highlight not in HIGHLIGHT_STYLES:
            raise ConfigurationError(
                f"unknown highlight style {highlight!r} (choose from {', '.join(HIGHLIGHT_STYLES)})"
            )
        self.stream = stream if stream is not None else sys.stdout
        self.style = HIGHLIGHT_STYLES[highlight]

    def _styled(self, text: str) -> str:
        if not text or not self.style:
            return text
        return f"{self.style}{text}{RESET}"

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except (OSError, ValueError) as ex:
            print(f"[T9] Render error: {ex}", file=sys.stderr)

    def draw(self, committed: str, highlighted: str, trailing: str = "") -> None:
        self._write(CLEAR_LINE + committed + self._styled(highlighted) + trailing)

    def close(self) -> None:
        self._write("\n")
