"""Colorscheme - a named mapping of color slots to color values."""

from dataclasses import dataclass, field

from dynamic_colors.core.constants import COLOR_SLOTS


@dataclass
class Colorscheme:
    """
    A named set of optional color assignments.

    Any subset of COLOR_SLOTS may be defined. A slot that is missing from
    ``colors`` or mapped to an empty string is undefined, which means
    "leave this terminal color alone" when the scheme is applied.
    """
    name: str
    colors: dict[str, str] = field(default_factory=dict)

    def get(self, slot: str) -> str | None:
        """Return the value for a slot, or None if it is undefined."""
        value = self.colors.get(slot)
        return value or None

    def is_defined(self, slot: str) -> bool:
        return self.get(slot) is not None

    def defined(self) -> list[tuple[str, str]]:
        """Defined (slot, value) pairs in COLOR_SLOTS order."""
        return [(slot, self.colors[slot]) for slot in COLOR_SLOTS if self.is_defined(slot)]

    def missing_slots(self) -> list[str]:
        """Undefined slots in COLOR_SLOTS order."""
        return [slot for slot in COLOR_SLOTS if not self.is_defined(slot)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_slots()

    def __len__(self) -> int:
        return len(self.defined())
