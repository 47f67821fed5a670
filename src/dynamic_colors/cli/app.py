"""Typer CLI application with one command per handler plus letter aliases."""

from contextlib import contextmanager
from typing import Annotated, Callable, Iterator, Optional

import typer
from rich.console import Console

from dynamic_colors.cli import commands
from dynamic_colors.cli.commands import Session
from dynamic_colors.config import Settings
from dynamic_colors.core.constants import PROGRAM
from dynamic_colors.errors import DynamicColorsError
from dynamic_colors.logging import setup_logging

USAGE = f"""\
Usage: {PROGRAM} [--verbose] <command> [<args>]

Commands:
  help                       show this help
  init                       apply the active colorscheme
  list                       list available colorschemes
  switch <colorscheme>       switch to the given colorscheme
  cycle                      switch to the next colorscheme
  audit <colorscheme>        report colors the colorscheme leaves undefined
  edit [<colorscheme>...]    edit colorschemes, or the colorscheme directory
  new <colorscheme>          create a colorscheme and open it in the editor

Each command may be abbreviated to its first letter."""

# Commands that run without a scheme directory
STANDALONE_COMMANDS = {"help", "h"}


def print_usage(console: Console) -> None:
    console.print(USAGE, markup=False, highlight=False, soft_wrap=True)


@contextmanager
def reporting_errors(err_console: Console) -> Iterator[None]:
    """Turn a DynamicColorsError into a one-line diagnostic and exit 1."""
    try:
        yield
    except DynamicColorsError as e:
        err_console.print(f"{PROGRAM}: {e}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from e


def finish(code: int) -> None:
    if code:
        raise typer.Exit(code)


def create_app(settings_factory: Callable[[], Settings] = Settings.from_env) -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name=PROGRAM,
        help="Switch terminal color schemes with OSC escape sequences.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ) -> None:
        setup_logging("DEBUG" if verbose else "WARNING")
        if ctx.invoked_subcommand is None:
            print_usage(err_console)
            raise typer.Exit(1)
        if ctx.invoked_subcommand in STANDALONE_COMMANDS:
            return
        with reporting_errors(err_console):
            ctx.obj = Session.open(settings_factory(), console=console, err_console=err_console)

    def run(ctx: typer.Context, handler: Callable[..., int], *args) -> None:
        with reporting_errors(err_console):
            code = handler(ctx.obj, *args)
        finish(code)

    def help_command() -> None:
        """Show usage."""
        print_usage(console)

    def init(ctx: typer.Context) -> None:
        """Apply the active colorscheme."""
        run(ctx, commands.init)

    def list_command(ctx: typer.Context) -> None:
        """List available colorschemes."""
        run(ctx, commands.list_schemes)

    def switch(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Colorscheme to switch to")],
    ) -> None:
        """Switch to the given colorscheme."""
        run(ctx, commands.switch, name)

    def cycle(ctx: typer.Context) -> None:
        """Switch to the next colorscheme."""
        run(ctx, commands.cycle)

    def audit(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Colorscheme to check")],
    ) -> None:
        """Report colors the colorscheme leaves undefined."""
        run(ctx, commands.audit, name)

    def edit(
        ctx: typer.Context,
        names: Annotated[Optional[list[str]], typer.Argument(help="Colorschemes to edit")] = None,
    ) -> None:
        """Edit colorschemes, or the colorscheme directory."""
        run(ctx, commands.edit, names or [])

    def new(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Name of the new colorscheme")],
    ) -> None:
        """Create a colorscheme and open it in the editor."""
        run(ctx, commands.new, name)

    for name, alias, func in (
        ("help", "h", help_command),
        ("init", "i", init),
        ("list", "l", list_command),
        ("switch", "s", switch),
        ("cycle", "c", cycle),
        ("audit", "a", audit),
        ("edit", "e", edit),
        ("new", "n", new),
    ):
        app.command(name)(func)
        app.command(alias, hidden=True)(func)

    return app
