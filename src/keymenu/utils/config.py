"""Configuration management."""

import os
from typing import Mapping, Optional

DEFAULT_TITLE = "Default Menu"
DEFAULT_PROMPT = "Make a Selection: "

ENV_PREFIX = "KEYMENU_"


class Config:
    """Runtime configuration for the keymenu command line.

    Nothing is persisted; values come from defaults and KEYMENU_* env vars.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Load config from defaults and the environment."""
        self._environ = os.environ if environ is None else environ
        self._load()

    def _load(self):
        """Set defaults, then apply env overrides."""
        self.debug = False
        self.title: Optional[str] = DEFAULT_TITLE
        self.prompt = DEFAULT_PROMPT
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply KEYMENU_* vars, bools parsed, the rest kept as text."""
        for key, value in self._environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            attr_name = key[len(ENV_PREFIX) :].lower()
            if attr_name.startswith("_") or not hasattr(self, attr_name):
                continue
            current = getattr(self, attr_name)
            if isinstance(current, bool):
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            else:
                setattr(self, attr_name, value)

    def as_dict(self) -> dict[str, object]:
        """Current settings as a plain dict."""
        return {"debug": self.debug, "title": self.title, "prompt": self.prompt}
