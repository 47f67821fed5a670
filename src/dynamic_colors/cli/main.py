"""Main CLI entry point with command routing."""

import sys
from typing import Optional

import typer
from rich.console import Console

from dynamic_colors.cli.app import create_app, print_usage
from dynamic_colors.core.constants import PROGRAM
from dynamic_colors.logging import get_logger

logger = get_logger(__name__)

# The click that typer runs on (vendored since typer 0.26) raises its own
# UsageError; typer.BadParameter derives from it directly.
UsageError: type[Exception] = typer.BadParameter.__mro__[1]


def run(argv: Optional[list[str]] = None) -> int:
    """Run one invocation and return its exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    app = create_app()
    try:
        result = app(args=args, prog_name=PROGRAM, standalone_mode=False)
    except UsageError as e:
        # Unknown command or wrong number of arguments
        logger.debug("Usage error: %s", e)
        print_usage(Console(stderr=True))
        return 1
    except typer.Abort:
        return 130
    return result if isinstance(result, int) else 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
