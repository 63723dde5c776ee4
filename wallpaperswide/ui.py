from __future__ import annotations

import os
import sys
from typing import Optional


class ConsoleUI:
    """Prints progress events and keeps one transient status line at the bottom."""

    _COLORS = {
        "info": "36",      # cyan
        "success": "32",   # green
        "warning": "33",   # yellow
        "error": "31",     # red
        "muted": "90",     # bright black / grey
    }

    def __init__(self) -> None:
        self._supports_ansi = sys.stdout.isatty() and os.getenv("TERM") != "dumb"
        self._transient: Optional[str] = None
        self._transient_level = "muted"
        self._transient_length = 0

        if os.name == "nt" and self._supports_ansi:
            import colorama

            colorama.just_fix_windows_console()

    def _colorize(self, text: str, level: str) -> str:
        if not self._supports_ansi:
            return text
        code = self._COLORS.get(level)
        if not code:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def _clear_transient(self) -> None:
        if not self._transient_length:
            return
        sys.stdout.write("\r" + " " * self._transient_length + "\r")
        sys.stdout.flush()
        self._transient_length = 0

    def _render_transient(self) -> None:
        self._clear_transient()
        if not self._transient or not sys.stdout.isatty():
            return
        sys.stdout.write(self._colorize(self._transient, self._transient_level))
        sys.stdout.flush()
        self._transient_length = len(self._transient)

    def update_detail(self, message: Optional[str], *, level: str = "muted") -> None:
        self._transient = message
        self._transient_level = level
        self._render_transient()

    def log_event(self, message: str, *, level: str = "info") -> None:
        self._clear_transient()
        print(self._colorize(message, level), flush=True)
        self._render_transient()

    def finalize(self) -> None:
        self._transient = None
        self._clear_transient()
