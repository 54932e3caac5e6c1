"""Single-keystroke console menu."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Optional, Union

from keymenu.terminal import ConsoleTerminal, Terminal
from keymenu.utils.config import DEFAULT_PROMPT, DEFAULT_TITLE
from keymenu.utils.debug import debug_menu
from keymenu.utils.exceptions import (
    DuplicateItemError,
    InvalidMenuKeyError,
    InvalidMenuSelectionError,
)

# Separator width when the menu has no title
DEFAULT_SEPARATOR_WIDTH = 10

MenuItems = Union[Mapping[str, str], Iterable[tuple[str, str]]]

# Marks add() called with a single argument
_NO_LABEL = object()


class Menu:
    """A titled set of single-character options read with one keystroke.

    Items keep their insertion order. Keys are unique and items can't be
    removed once added.

    Example:
        menu = Menu("Main", "Choice", pad_prompt=True)
        menu.add("n", "New game")
        menu.add({"l": "Load", "q": "Quit"})
        key = menu.display_and_select(clear_screen=True)
    """

    def __init__(
        self,
        title: Optional[str] = DEFAULT_TITLE,
        prompt: str = DEFAULT_PROMPT,
        pad_prompt: bool = False,
        terminal: Optional[Terminal] = None,
    ):
        """Create a menu.

        Args:
            title: Heading shown above the items, or None for no heading
            prompt: Text shown when waiting for a key
            pad_prompt: Append ": " to the prompt
            terminal: Console backend, defaults to ConsoleTerminal
        """
        self.title = title
        self.prompt = f"{prompt}: " if pad_prompt else prompt
        self.terminal = terminal if terminal is not None else ConsoleTerminal()
        self._items: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"Menu(title={self.title!r}, prompt={self.prompt!r}, items={len(self)})"

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.iterate()

    @property
    def items(self) -> Mapping[str, str]:
        """Read-only view of the key -> label mapping."""
        return MappingProxyType(self._items)

    def add(self, key, label=_NO_LABEL) -> None:
        """Add one item, a (key, label) pair, or a mapping of items.

        Accepted forms:
            add("a", "Apple")
            add(("a", "Apple"))
            add({"a": "Apple", "b": "Banana"})

        Raises:
            DuplicateItemError: If a key is already present
            InvalidMenuKeyError: If a key is not a single character
            TypeError: If a label is not a string
        """
        if label is _NO_LABEL:
            if isinstance(key, Mapping):
                self.add_many(key)
                return
            if isinstance(key, tuple) and len(key) == 2:
                key, label = key
            else:
                raise TypeError(
                    "add() takes a key and label, a (key, label) pair or a mapping"
                )

        self._add_item(key, label)

    def _add_item(self, key, label: str) -> None:
        _check_key(key)
        if not isinstance(label, str):
            raise TypeError(f"Menu labels must be strings, got {label!r}")
        if key in self._items:
            debug_menu("duplicate item rejected", key=key)
            raise DuplicateItemError(key)
        self._items[key] = label
        debug_menu("item added", key=key, label=label)

    def add_many(self, items: MenuItems) -> None:
        """Add items in order, stopping at the first duplicate.

        Items added before the failure stay in the menu.
        """
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, label in pairs:
            self._add_item(key, label)

    def iterate(self) -> Iterator[tuple[str, str]]:
        """Yield (key, label) pairs in insertion order."""
        yield from self._items.items()

    @property
    def separator(self) -> str:
        """Dash line as wide as the title, or the default width without one."""
        width = len(self.title) if self.title is not None else DEFAULT_SEPARATOR_WIDTH
        return "-" * width

    def render(self) -> list[str]:
        """Build the display lines, excluding the prompt."""
        line = self.separator
        lines = [self.title or "", line, ""]
        lines.extend(f"{key}: {label}" for key, label in self.iterate())
        lines.append(line)
        return lines

    def display_and_select(self, clear_screen: bool = False) -> str:
        """Show the menu and read a single keystroke.

        One attempt only; callers that want to re-prompt catch
        InvalidMenuSelectionError and call again.

        Args:
            clear_screen: Clear the terminal before drawing

        Returns:
            The key of the selected item

        Raises:
            InvalidMenuSelectionError: If the key has no menu item
        """
        if clear_screen:
            self.terminal.clear_screen()
        for text in self.render():
            self.terminal.write_line(text)
        self.terminal.write(self.prompt)

        key = self.terminal.read_key()
        if key not in self._items:
            debug_menu("invalid selection", key=key)
            raise InvalidMenuSelectionError(key)
        debug_menu("selected", key=key)
        return key


def _check_key(key) -> None:
    if not isinstance(key, str) or len(key) != 1:
        raise InvalidMenuKeyError(key)
