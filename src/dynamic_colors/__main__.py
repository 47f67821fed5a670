"""Allow ``python -m dynamic_colors``."""

from dynamic_colors.cli.main import main

main()
