"""
dynamic-colors: switch terminal color schemes on the fly

Applies named color schemes to the running terminal with OSC escape
sequences, remembers the active one, and cycles through the rest.

Quick Start:
    >>> from dynamic_colors import Settings, SchemeStore, ColorWriter
    >>> settings = Settings.from_env()
    >>> store = SchemeStore.from_candidates(settings.scheme_dirs, settings.state_file)
    >>> ColorWriter().apply(store.load_scheme("solarized-dark"))

Features:
    - 16 palette colors plus background, foreground, cursor, mouse,
      highlight and border colors
    - tmux passthrough wrapping
    - Declarative scheme files (parsed, never executed)
    - Audit schemes for undefined colors
"""

__version__ = "0.1.0"

# Core types
from dynamic_colors.core.constants import COLOR_NAMES, COLOR_SLOTS
from dynamic_colors.core.scheme import Colorscheme

# Storage and output
from dynamic_colors.config import Settings
from dynamic_colors.io.store import SchemeStore
from dynamic_colors.render.terminal import ColorWriter

# Errors
from dynamic_colors.errors import DynamicColorsError

__all__ = [
    # Version
    "__version__",
    # Core types
    "COLOR_NAMES",
    "COLOR_SLOTS",
    "Colorscheme",
    # Storage and output
    "Settings",
    "SchemeStore",
    "ColorWriter",
    # Errors
    "DynamicColorsError",
]
