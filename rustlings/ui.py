"""Terminal output helpers: coloured status lines and progress spinners."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> Text:
    """Return ``text`` styled in bold."""
    return Text(str(text), style="bold")


def _announce(prefix: str, message: str, colour: str) -> None:
    _console().print(Text.assemble((prefix, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _announce("✓" if no_emoji() else "✅", message, "green")


class _Spinner:
    """A transient spinner shown while a long step runs."""

    def __init__(self, message: str) -> None:
        self.message = message
        self._status = _console().status(message, spinner="dots")

    def update(self, message: str) -> None:
        self.message = message
        self._status.update(message)

    def __enter__(self) -> "_Spinner":
        self._status.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._status.stop()


def spinner(message: str) -> _Spinner:
    """Return a context manager that shows a spinner with ``message``."""
    return _Spinner(message)