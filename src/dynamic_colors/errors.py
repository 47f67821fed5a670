"""Exceptions raised by dynamic-colors.

Every error that should end the process with a one-line diagnostic derives
from DynamicColorsError; the CLI catches that base class and exits 1.
"""

from pathlib import Path


class DynamicColorsError(Exception):
    """Base class for fatal, user-facing errors."""


class ConfigurationError(DynamicColorsError):
    """No colorscheme directory exists at any candidate path."""

    def __init__(self, candidates: list[Path]):
        self.candidates = list(candidates)
        searched = ", ".join(str(p) for p in self.candidates) or "(none)"
        super().__init__(f"no colorscheme directory found (searched: {searched})")


class UnknownSchemeError(DynamicColorsError):
    """A colorscheme name has no definition file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown colorscheme: {name}")


class SchemeExistsError(DynamicColorsError):
    """``new`` was asked to create a scheme that already exists."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"colorscheme {name} already exists at {path}")


class InvalidSchemeNameError(DynamicColorsError):
    """A scheme name that cannot be mapped to a plain file name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid colorscheme name: {name!r}")


class SchemeFormatError(DynamicColorsError):
    """A line in a scheme file is not a valid assignment."""

    def __init__(self, source: Path | str, lineno: int, line: str):
        self.source = source
        self.lineno = lineno
        self.line = line
        super().__init__(f"{source}:{lineno}: cannot parse line: {line.strip()}")


class SchemeReadError(DynamicColorsError):
    """A scheme file exists but cannot be read or decoded."""

    def __init__(self, source: Path | str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"cannot read {source}: {reason}")


class StateError(DynamicColorsError):
    """The active scheme pointer exists but cannot be read."""


class EditorError(DynamicColorsError):
    """The configured editor could not be started."""
