"""CLI command handlers."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from keymenu.menu import Menu
from keymenu.terminal import ConsoleTerminal
from keymenu.utils.config import Config
from keymenu.utils.debug import debug_cli, reload_config
from keymenu.utils.exceptions import InvalidMenuSelectionError, KeyMenuError

# Menu and messages go to stderr, the selected key to stdout
console = Console(stderr=True)


def parse_item(raw: str) -> tuple[str, str]:
    """Split a KEY=LABEL argument."""
    key, sep, label = raw.partition("=")
    if not sep or len(key) != 1:
        raise typer.BadParameter(
            f"expected KEY=LABEL with a single-character key, got {raw!r}",
            param_hint="ITEMS",
        )
    return key, label


def build_menu(
    items: list[str],
    config: Config,
    title: Optional[str] = None,
    no_title: bool = False,
    prompt: Optional[str] = None,
    pad_prompt: bool = False,
) -> Menu:
    """Build a Menu from CLI arguments, falling back to config defaults."""
    menu = Menu(
        title=None if no_title else (title if title is not None else config.title),
        prompt=prompt if prompt is not None else config.prompt,
        pad_prompt=pad_prompt,
        terminal=ConsoleTerminal(console),
    )
    try:
        menu.add_many(parse_item(raw) for raw in items)
    except KeyMenuError as e:
        raise typer.BadParameter(str(e), param_hint="ITEMS") from e
    return menu


def cmd_select(
    items: list[str],
    title: Optional[str] = None,
    no_title: bool = False,
    prompt: Optional[str] = None,
    pad_prompt: bool = False,
    clear: bool = False,
    retry: bool = False,
) -> int:
    """Show the menu, print the chosen key. Returns the exit code."""
    reload_config()
    config = Config()
    menu = build_menu(items, config, title, no_title, prompt, pad_prompt)
    debug_cli("select", items=len(menu), retry=retry)

    while True:
        try:
            key = menu.display_and_select(clear_screen=clear)
        except InvalidMenuSelectionError as e:
            console.out("")
            if retry:
                console.print(f"[yellow]{escape(str(e))}, try again[/yellow]")
                continue
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            return 1
        break

    console.out("")
    typer.echo(key)
    return 0


def cmd_config() -> None:
    """Print effective settings."""
    config = Config()
    for name, value in config.as_dict().items():
        console.print(f"[bold]{name}:[/bold] {escape(repr(value))}", highlight=False)
