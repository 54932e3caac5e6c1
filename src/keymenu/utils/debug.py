"""Debug logging utility."""

import sys
from datetime import datetime

from keymenu.utils.config import Config

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config():
    """Reload config (call after KEYMENU_DEBUG changes)."""
    global _config
    _config = None


def _write(line: str):
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'menu', 'terminal', 'cli'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[keymenu:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _write(line)


def debug_menu(message: str, **kwargs):
    """Log menu-related debug message."""
    debug("menu", message, **kwargs)


def debug_cli(message: str, **kwargs):
    """Log CLI-related debug message."""
    debug("cli", message, **kwargs)

