"""Allow running as `python -m keymenu`."""

from keymenu.cli import app

app()
