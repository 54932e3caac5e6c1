"""CLI entry point for keymenu.

Uses Typer for command routing. The menu is drawn on stderr so the
selected key on stdout can be captured by scripts.
"""

from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="keymenu",
    help="Show a single-keystroke menu and print the chosen key",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        from keymenu import __version__

        typer.echo(f"keymenu {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Single-keystroke console menus."""


@app.command()
def select(
    items: list[str] = typer.Argument(
        ..., help="Menu items as KEY=LABEL, shown in the order given"
    ),
    title: Optional[str] = typer.Option(
        None, "--title", "-t", help="Menu title (default from KEYMENU_TITLE)"
    ),
    no_title: bool = typer.Option(False, "--no-title", help="Draw without a title"),
    prompt: Optional[str] = typer.Option(
        None, "--prompt", "-p", help="Prompt text (default from KEYMENU_PROMPT)"
    ),
    pad_prompt: bool = typer.Option(
        False, "--pad-prompt", help="Append ': ' to the prompt"
    ),
    clear: bool = typer.Option(False, "--clear", help="Clear the screen first"),
    retry: bool = typer.Option(
        False, "--retry", "-r", help="Ask again until a listed key is pressed"
    ),
) -> None:
    """Show a menu and print the selected key."""
    from keymenu.cli.commands import cmd_select

    code = cmd_select(
        items,
        title=title,
        no_title=no_title,
        prompt=prompt,
        pad_prompt=pad_prompt,
        clear=clear,
        retry=retry,
    )
    if code:
        raise typer.Exit(code)


@app.command()
def config() -> None:
    """Show effective settings."""
    from keymenu.cli.commands import cmd_config

    cmd_config()
