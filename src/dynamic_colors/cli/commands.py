"""
Command handlers.

Each handler performs one state transition over the scheme store and
returns a process exit code. Errors are raised as DynamicColorsError and
reported by the CLI layer.
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from rich.console import Console

from dynamic_colors.config import DEFAULT_EDITOR, Settings
from dynamic_colors.errors import EditorError
from dynamic_colors.io.store import SchemeStore
from dynamic_colors.logging import get_logger
from dynamic_colors.render.terminal import ColorWriter

logger = get_logger(__name__)


@dataclass
class Session:
    """Everything a handler touches during one invocation."""
    settings: Settings
    store: SchemeStore
    writer: ColorWriter
    console: Console = field(default_factory=lambda: Console(highlight=False))
    err_console: Console = field(default_factory=lambda: Console(stderr=True, highlight=False))

    @classmethod
    def open(cls, settings: Settings, **consoles: Console) -> "Session":
        """Resolve the scheme directory and build a session around it."""
        return cls(
            settings=settings,
            store=SchemeStore.from_candidates(settings.scheme_dirs, settings.state_file),
            writer=ColorWriter(multiplexed=settings.multiplexed),
            **consoles,
        )


def next_scheme(names: Sequence[str], current: str | None) -> str | None:
    """
    Pick the scheme ``cycle`` should switch to.

    With no current scheme the first one is chosen. Otherwise the entry
    right after ``current`` is chosen; there is none when ``current`` is
    last or no longer listed, and cycling stops there.
    """
    if current is None:
        return names[0] if names else None
    try:
        index = names.index(current)
    except ValueError:
        return None
    if index + 1 < len(names):
        return names[index + 1]
    return None


def run_editor(editor: str, paths: Iterable[Path]) -> int:
    """Run the editor on ``paths`` with the inherited terminal and wait for it."""
    try:
        program = shlex.split(editor) or [DEFAULT_EDITOR]
    except ValueError as e:
        raise EditorError(f"cannot parse editor command {editor!r}: {e}") from None

    command = [*program, *(str(p) for p in paths)]
    logger.debug("Running %s", command)
    try:
        return subprocess.run(command).returncode
    except FileNotFoundError:
        raise EditorError(f"editor not found: {command[0]}") from None
    except OSError as e:
        raise EditorError(f"cannot run editor {command[0]}: {e.strerror or e}") from None


def init(session: Session) -> int:
    """Re-apply the active scheme, if there is one."""
    name = session.store.read_active_scheme_name()
    if name is None:
        logger.debug("No active colorscheme")
        return 0
    session.writer.apply(session.store.load_scheme(name))
    return 0


def switch(session: Session, name: str) -> int:
    """Make ``name`` the active scheme and apply it."""
    scheme = session.store.load_scheme(name)
    session.store.write_active_scheme_name(name)
    written = session.writer.apply(scheme)
    logger.info("Switched to %s (%d colors)", name, written)
    return 0


def cycle(session: Session) -> int:
    """Switch to the scheme after the active one, in listing order."""
    names = list(session.store.list_schemes())
    current = session.store.read_active_scheme_name()
    target = next_scheme(names, current)
    if target is None:
        logger.debug("Nothing to cycle to after %s", current)
        return 0
    return switch(session, target)


def list_schemes(session: Session) -> int:
    """Print every scheme name, one per line."""
    for name in session.store.list_schemes():
        session.console.print(name, markup=False, soft_wrap=True)
    return 0


def audit(session: Session, name: str) -> int:
    """Report the slots ``name`` leaves undefined. Exit 1 if there are any."""
    scheme = session.store.load_scheme(name)
    missing = scheme.missing_slots()
    for slot in missing:
        session.err_console.print(f"{slot} is not defined", markup=False, soft_wrap=True)
    return 1 if missing else 0


def edit(session: Session, names: Sequence[str] = ()) -> int:
    """Open the named schemes, or the whole scheme directory, in the editor."""
    if names:
        paths = [session.store.scheme_path(name) for name in names]
    else:
        paths = [session.store.scheme_dir]
    return run_editor(session.settings.editor, paths)


def new(session: Session, name: str) -> int:
    """Create an empty scheme from the template and open it in the editor."""
    path = session.store.create_scheme(name)
    return run_editor(session.settings.editor, [path])
