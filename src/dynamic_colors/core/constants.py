"""Shared constants for terminal color schemes."""

# Escape sequence framing
ESC = "\x1b"
BEL = "\x07"
OSC = f"{ESC}]"
ST = f"{ESC}\\"

# Special-purpose color roles, in report/template order
SPECIAL_SLOTS: tuple[str, ...] = (
    "background",
    "foreground",
    "cursor",
    "mouse_background",
    "mouse_foreground",
    "highlight",
    "border",
)

# 16-color palette slots (OSC 4 indices 0-15)
PALETTE_SLOTS: tuple[str, ...] = tuple(f"color{i}" for i in range(16))

COLOR_SLOTS: tuple[str, ...] = SPECIAL_SLOTS + PALETTE_SLOTS

# Canonical ANSI names, indexed like PALETTE_SLOTS
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)

# OSC parameter numbers for the special roles
OSC_PALETTE = 4
OSC_CODES: dict[str, int] = {
    "foreground": 10,
    "background": 11,
    "cursor": 12,
    "mouse_foreground": 13,
    "mouse_background": 14,
    "highlight": 17,
    "border": 708,       # rxvt extension
}

SCHEME_EXTENSION = ".sh"

PROGRAM = "dynamic-colors"
