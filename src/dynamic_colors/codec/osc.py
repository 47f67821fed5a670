"""Build OSC escape sequences that set terminal colors."""

from typing import Mapping

from dynamic_colors.core.constants import BEL, ESC, OSC, OSC_CODES, OSC_PALETTE, ST

MULTIPLEXER_MARKER = "TMUX"


def osc(ps: int, pt: str) -> str:
    """Return ``ESC ] ps ; pt BEL``."""
    return f"{OSC}{ps};{pt}{BEL}"


def palette_index(slot: str) -> int | None:
    """Return N for a ``colorN`` slot with N in 0-15, else None."""
    if not slot.startswith("color"):
        return None
    digits = slot[len("color"):]
    if not digits.isdigit() or str(int(digits)) != digits:
        return None
    index = int(digits)
    return index if index < 16 else None


def color_sequence(slot: str, value: str) -> str | None:
    """
    Return the OSC sequence that sets ``slot`` to ``value``.

    ``colorN`` maps to OSC 4 with payload ``N;value``; the special roles map
    to their own OSC numbers. Unrecognized slots return None.
    """
    index = palette_index(slot)
    if index is not None:
        return osc(OSC_PALETTE, f"{index};{value}")
    code = OSC_CODES.get(slot)
    if code is None:
        return None
    return osc(code, value)


def passthrough(sequence: str) -> str:
    """Wrap a sequence in a tmux DCS passthrough envelope."""
    return f"{ESC}Ptmux;{ESC}{sequence}{ST}"


def encode(slot: str, value: str, multiplexed: bool = False) -> str | None:
    """Color sequence for a slot, wrapped for tmux when ``multiplexed``."""
    sequence = color_sequence(slot, value)
    if sequence is None:
        return None
    return passthrough(sequence) if multiplexed else sequence


def in_multiplexer(environ: Mapping[str, str]) -> bool:
    """True when running inside a tmux session."""
    return bool(environ.get(MULTIPLEXER_MARKER))
