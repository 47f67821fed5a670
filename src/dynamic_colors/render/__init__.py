"""Terminal output."""

from dynamic_colors.render.terminal import ColorWriter

__all__ = ["ColorWriter"]
