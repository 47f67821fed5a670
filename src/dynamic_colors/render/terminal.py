"""Write color-setting escape sequences to the terminal."""

import sys
from typing import TextIO

from dynamic_colors.codec.osc import encode
from dynamic_colors.core.scheme import Colorscheme


class ColorWriter:
    """
    Emit OSC color sequences for a scheme.

    Sequences are wrapped in a tmux passthrough envelope when
    ``multiplexed`` is set. With no explicit stream, sys.stdout is looked
    up at write time.
    """

    def __init__(self, stream: TextIO | None = None, multiplexed: bool = False):
        self._stream = stream
        self.multiplexed = multiplexed

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, slot: str, value: str) -> bool:
        """Write one slot. Returns False for slots with no sequence."""
        sequence = encode(slot, value, self.multiplexed)
        if sequence is None:
            return False
        self.stream.write(sequence)
        return True

    def apply(self, scheme: Colorscheme) -> int:
        """Write every defined slot of ``scheme`` and flush."""
        written = sum(self.write(slot, value) for slot, value in scheme.defined())
        self.stream.flush()
        return written
