"""keymenu - Single-keystroke console menus."""

from importlib.metadata import version

__version__ = version("keymenu")

from keymenu.menu import Menu
from keymenu.terminal import ConsoleTerminal, Terminal
from keymenu.utils.exceptions import (
    DuplicateItemError,
    InvalidMenuKeyError,
    InvalidMenuSelectionError,
    KeyMenuError,
)

__all__ = [
    "Menu",
    "ConsoleTerminal",
    "Terminal",
    "KeyMenuError",
    "DuplicateItemError",
    "InvalidMenuKeyError",
    "InvalidMenuSelectionError",
]
