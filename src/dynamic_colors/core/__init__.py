"""Core data structures for color schemes."""

from dynamic_colors.core.constants import COLOR_NAMES, COLOR_SLOTS
from dynamic_colors.core.scheme import Colorscheme

__all__ = ["COLOR_NAMES", "COLOR_SLOTS", "Colorscheme"]
