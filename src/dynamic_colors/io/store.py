"""File-system backed scheme storage and the active scheme pointer."""

import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator

from dynamic_colors.codec.scheme_file import read_scheme, render_template
from dynamic_colors.core.constants import SCHEME_EXTENSION
from dynamic_colors.core.scheme import Colorscheme
from dynamic_colors.errors import (
    ConfigurationError,
    InvalidSchemeNameError,
    SchemeExistsError,
    StateError,
    UnknownSchemeError,
)
from dynamic_colors.logging import get_logger

logger = get_logger(__name__)


def resolve_scheme_directory(candidates: Iterable[str | Path]) -> Path:
    """Return the first candidate that is an existing directory."""
    searched = [Path(c) for c in candidates]
    for path in searched:
        if path.is_dir():
            logger.debug("Using colorscheme directory %s", path)
            return path
    raise ConfigurationError(searched)


def validate_scheme_name(name: str) -> str:
    """Reject names that would escape the scheme directory."""
    if not name or name.startswith(".") or "/" in name or os.sep in name:
        raise InvalidSchemeNameError(name)
    return name


class SchemeStore:
    """
    Named colorschemes in a directory, plus a one-line pointer file that
    records the most recently switched-to scheme.

    Nothing is cached: every call goes back to the file system, so separate
    invocations always see each other's writes.
    """

    def __init__(self, scheme_dir: str | Path, state_file: str | Path):
        self.scheme_dir = Path(scheme_dir)
        self.state_file = Path(state_file)

    @classmethod
    def from_candidates(cls, candidates: Iterable[str | Path], state_file: str | Path) -> "SchemeStore":
        return cls(resolve_scheme_directory(candidates), state_file)

    # -- active scheme pointer -------------------------------------------

    def read_active_scheme_name(self) -> str | None:
        """
        Return the active scheme name, or None if none has been set.

        Raises StateError if the pointer file exists but cannot be read.
        """
        try:
            with open(self.state_file, encoding="utf-8") as f:
                first_line = f.readline()
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise StateError(f"cannot read {self.state_file}: not valid UTF-8 at byte {e.start}") from None
        except OSError as e:
            raise StateError(f"cannot read {self.state_file}: {e.strerror or e}") from e
        return first_line.strip() or None

    def write_active_scheme_name(self, name: str) -> None:
        """Replace the pointer file with ``name``."""
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.state_file.parent, prefix=".colorscheme.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(f"{name}\n")
            os.replace(tmp, self.state_file)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Active colorscheme is now %s", name)

    # -- schemes ----------------------------------------------------------

    def scheme_path(self, name: str) -> Path:
        return self.scheme_dir / f"{validate_scheme_name(name)}{SCHEME_EXTENSION}"

    def exists(self, name: str) -> bool:
        return self.scheme_path(name).is_file()

    def load_scheme(self, name: str) -> Colorscheme:
        """Parse the named scheme. Raises UnknownSchemeError if it is missing."""
        path = self.scheme_path(name)
        if not path.is_file():
            raise UnknownSchemeError(name)
        logger.debug("Loading colorscheme %s from %s", name, path)
        return read_scheme(path, name)

    def list_schemes(self) -> Iterator[str]:
        """Yield scheme names in lexical order, re-reading the directory each call."""
        paths = sorted(
            p for p in self.scheme_dir.glob(f"*{SCHEME_EXTENSION}")
            if p.is_file() and not p.name.startswith(".")
        )
        for path in paths:
            yield path.stem

    def create_scheme(self, name: str) -> Path:
        """Write an empty template for ``name`` and return its path."""
        path = self.scheme_path(name)
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(render_template(name))
        except FileExistsError:
            raise SchemeExistsError(name, path) from None
        logger.debug("Created colorscheme template %s", path)
        return path
