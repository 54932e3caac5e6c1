"""Console collaborators used by the menu.

The menu only needs to write lines, clear the screen and read one key.
Those live behind the Terminal protocol so other backends can be swapped in.
"""

from typing import Callable, Optional, Protocol

import readchar
from rich.console import Console


class Terminal(Protocol):
    """Protocol for terminal backends."""

    def clear_screen(self) -> None:
        """Clear the visible screen."""
        ...

    def write(self, text: str) -> None:
        """Write text without a trailing newline."""
        ...

    def write_line(self, text: str = "") -> None:
        """Write text followed by a newline."""
        ...

    def read_key(self) -> str:
        """Block until one key is pressed and return it, without echo."""
        ...


class ConsoleTerminal:
    """Terminal backed by a Rich console and readchar."""

    def __init__(
        self,
        console: Optional[Console] = None,
        read_key: Optional[Callable[[], str]] = None,
    ):
        self.console = console or Console()
        self._read_key = read_key or readchar.readkey

    def clear_screen(self) -> None:
        # No-op when output is not a terminal
        self.console.clear()

    def write(self, text: str) -> None:
        # Raw write to the console stream, Rich rendering would expand tabs
        # and drop control characters
        file = self.console.file
        file.write(text)
        file.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_key(self) -> str:
        """Read one keystroke in raw mode.

        Special keys (arrows, function keys) come back as their full escape
        sequence. Ctrl+C raises KeyboardInterrupt.
        """
        return self._read_key()
