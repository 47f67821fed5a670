"""Pytest fixtures: a throwaway scheme directory and an isolated environment."""

import io
import logging
from pathlib import Path

import pytest

from dynamic_colors.cli.commands import Session
from dynamic_colors.config import Settings
from dynamic_colors.io.store import SchemeStore
from dynamic_colors.render.terminal import ColorWriter

SCHEMES = {
    "a": 'background="#000000"\nforeground="#ffffff"\ncolor1="#aa0000" # red\n',
    "b": 'background="#111111"\ncolor2="#00aa00"\n',
    "c": 'background="#222222"\n',
}


def write_scheme(scheme_dir: Path, name: str, text: str) -> Path:
    """Write ``<name>.sh`` into ``scheme_dir``."""
    path = scheme_dir / f"{name}.sh"
    path.write_text(text)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger("dynamic_colors")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    return tmp_path / "root"


@pytest.fixture
def scheme_dir(root_dir: Path) -> Path:
    """A scheme directory holding a.sh, b.sh and c.sh."""
    directory = root_dir / "colorschemes"
    directory.mkdir(parents=True)
    for name, text in SCHEMES.items():
        write_scheme(directory, name, text)
    return directory


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "dynamic-colors" / "colorscheme"


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, root_dir: Path, scheme_dir: Path) -> Path:
    """Point the CLI at the temporary scheme directory and cache."""
    monkeypatch.setenv("DYNAMIC_COLORS_ROOT", str(root_dir))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("EDITOR", "vi")
    monkeypatch.delenv("TMUX", raising=False)
    return scheme_dir


@pytest.fixture
def store(scheme_dir: Path, state_file: Path) -> SchemeStore:
    return SchemeStore(scheme_dir, state_file)


@pytest.fixture
def output() -> io.StringIO:
    """Where the session's color writer sends escape sequences."""
    return io.StringIO()


@pytest.fixture
def session(store: SchemeStore, output: io.StringIO) -> Session:
    settings = Settings(state_file=store.state_file, scheme_dirs=[store.scheme_dir], editor="vi")
    return Session(settings=settings, store=store, writer=ColorWriter(stream=output))
