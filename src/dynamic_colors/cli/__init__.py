"""Command-line interface."""

from dynamic_colors.cli.main import main

__all__ = ["main"]
