"""Custom exceptions for keymenu.

This module defines a hierarchy of exceptions for menu errors:
- KeyMenuError: Base exception for all keymenu errors
- DuplicateItemError: A key was added twice
- InvalidMenuSelectionError: The pressed key has no menu entry
- InvalidMenuKeyError: A key is not a single character
"""

from typing import Any, Optional


class KeyMenuError(Exception):
    """Base exception for all keymenu errors.

    All keymenu-specific exceptions inherit from this class, allowing
    callers to catch all keymenu errors with a single except clause.
    """

    pass


class DuplicateItemError(KeyMenuError):
    """A menu item with the same key already exists.

    Attributes:
        key: The key that was already present
    """

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(message or f"Menu already has an item for key {key!r}")
        self.key = key


class InvalidMenuSelectionError(KeyMenuError):
    """The pressed key does not match any menu item.

    Attributes:
        key: The key that was read from the terminal
    """

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(message or f"No menu item for key {key!r}")
        self.key = key


class InvalidMenuKeyError(KeyMenuError, ValueError):
    """A menu key is not a single-character string.

    Attributes:
        key: The rejected key
    """

    def __init__(self, key: Any, message: Optional[str] = None):
        super().__init__(
            message or f"Menu keys must be single characters, got {key!r}"
        )
        self.key = key
