"""Utilities for keymenu."""

from keymenu.utils.exceptions import (
    DuplicateItemError,
    InvalidMenuKeyError,
    InvalidMenuSelectionError,
    KeyMenuError,
)

__all__ = [
    "DuplicateItemError",
    "InvalidMenuKeyError",
    "InvalidMenuSelectionError",
    "KeyMenuError",
]
