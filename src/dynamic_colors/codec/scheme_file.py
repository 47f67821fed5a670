"""
Read and write colorscheme definition files.

A scheme file is a list of shell-style assignments, one per line::

    #!/bin/sh
    background="#002b36"
    foreground='#839496'
    color0="#073642" # black

Files are parsed, never executed. Blank lines and ``#`` comments are
skipped, an ``export`` prefix is tolerated, and values may be double
quoted, single quoted or bare. An empty value leaves the slot undefined.
Keys that are not color slots are skipped with a warning.
"""

import re
from pathlib import Path

from dynamic_colors.core.constants import COLOR_NAMES, COLOR_SLOTS, PALETTE_SLOTS
from dynamic_colors.core.scheme import Colorscheme
from dynamic_colors.errors import SchemeFormatError, SchemeReadError
from dynamic_colors.logging import get_logger

logger = get_logger(__name__)

ASSIGNMENT_RE = re.compile(r"^(?:export\s+)?(?P<key>[A-Za-z_][A-Za-z0-9_]*)=(?P<rest>.*)$")
VALUE_RE = re.compile(
    r"""^(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"']*))\s*(?:\#.*)?$"""
)

_SLOT_SET = frozenset(COLOR_SLOTS)


def parse_assignment(line: str) -> tuple[str, str] | None:
    """
    Parse one line into ``(key, value)``.

    Returns None for blank and comment lines, raises ValueError for
    anything else that is not an assignment.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    match = ASSIGNMENT_RE.match(stripped)
    if not match:
        raise ValueError(line)
    value = VALUE_RE.match(match["rest"])
    if not value:
        raise ValueError(line)

    for group in ("dq", "sq", "bare"):
        if value[group] is not None:
            return match["key"], value[group]
    return match["key"], ""


def parse_scheme(text: str, name: str, source: Path | str | None = None) -> Colorscheme:
    """
    Parse scheme file contents into a Colorscheme.

    Later assignments to the same slot override earlier ones, matching
    how the files behave when sourced by a shell.
    """
    origin = source if source is not None else name
    colors: dict[str, str] = {}

    for lineno, line in enumerate(text.splitlines(), start=1):
        try:
            parsed = parse_assignment(line)
        except ValueError:
            raise SchemeFormatError(origin, lineno, line) from None
        if parsed is None:
            continue

        key, value = parsed
        if key not in _SLOT_SET:
            logger.warning("%s:%d: ignoring unknown key %r", origin, lineno, key)
            continue
        colors[key] = value

    return Colorscheme(name=name, colors=colors)


def read_scheme(path: Path, name: str | None = None) -> Colorscheme:
    """Load a scheme file from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SchemeReadError(path, f"not valid UTF-8 at byte {e.start}") from None
    except OSError as e:
        raise SchemeReadError(path, e.strerror or str(e)) from None
    return parse_scheme(text, name or path.stem, source=path)


def _slot_comment(slot: str) -> str:
    if slot in PALETTE_SLOTS:
        return f" # {COLOR_NAMES[PALETTE_SLOTS.index(slot)]}"
    return ""


def format_scheme(scheme: Colorscheme) -> str:
    """Serialize a scheme, writing every slot (undefined ones as empty)."""
    lines = ["#!/bin/sh", f"# {scheme.name}"]
    for slot in COLOR_SLOTS:
        value = scheme.get(slot) or ""
        lines.append(f'{slot}="{value}"{_slot_comment(slot)}')
    return "\n".join(lines) + "\n"


def render_template(name: str) -> str:
    """An empty scheme: all slots present, palette slots named."""
    return format_scheme(Colorscheme(name=name))
