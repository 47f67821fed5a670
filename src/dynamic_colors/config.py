"""
Runtime settings read from the environment.

Environment variables:
    XDG_CACHE_HOME       base directory for persisted state (default ~/.cache)
    HOME                 used for the default cache location
    EDITOR               editor for ``edit`` and ``new`` (default vi)
    TMUX                 set by tmux; switches on passthrough wrapping
    DYNAMIC_COLORS_ROOT  optional root whose ``colorschemes`` dir is searched first
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from dynamic_colors.codec.osc import in_multiplexer
from dynamic_colors.core.constants import PROGRAM

DEFAULT_EDITOR = "vi"
STATE_FILE_NAME = "colorscheme"

# Bundled schemes shipped inside the package
PACKAGE_SCHEME_DIR = Path(__file__).resolve().parent / "colorschemes"
SYSTEM_SCHEME_DIR = Path("/usr/share") / PROGRAM / "colorschemes"


def default_scheme_dirs(environ: Mapping[str, str]) -> list[Path]:
    """Candidate scheme directories in priority order."""
    candidates: list[Path] = []
    if root := environ.get("DYNAMIC_COLORS_ROOT"):
        candidates.append(Path(root).expanduser() / "colorschemes")
    candidates.append(PACKAGE_SCHEME_DIR)
    candidates.append(SYSTEM_SCHEME_DIR)
    return candidates


def cache_home(environ: Mapping[str, str]) -> Path:
    """Return $XDG_CACHE_HOME, falling back to $HOME/.cache."""
    if var := environ.get("XDG_CACHE_HOME"):
        return Path(var)
    home = environ.get("HOME")
    return (Path(home) if home else Path.home()) / ".cache"


@dataclass
class Settings:
    """Everything an invocation needs to know about its environment."""
    state_file: Path
    scheme_dirs: list[Path] = field(default_factory=list)
    editor: str = DEFAULT_EDITOR
    multiplexed: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``environ`` (defaults to os.environ)."""
        env = os.environ if environ is None else environ
        return cls(
            state_file=cache_home(env) / PROGRAM / STATE_FILE_NAME,
            scheme_dirs=default_scheme_dirs(env),
            editor=env.get("EDITOR", "").strip() or DEFAULT_EDITOR,
            multiplexed=in_multiplexer(env),
        )
