"""Encoders for terminal escape sequences and scheme files."""

from dynamic_colors.codec.osc import color_sequence, encode, osc, passthrough
from dynamic_colors.codec.scheme_file import format_scheme, parse_scheme, read_scheme, render_template

__all__ = [
    "color_sequence",
    "encode",
    "osc",
    "passthrough",
    "format_scheme",
    "parse_scheme",
    "read_scheme",
    "render_template",
]
