"""Shared pytest fixtures and test helpers for randclass tests."""

from __future__ import annotations

import logging
import os
import sys
import textwrap
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from randclass.domain.models import LoadedModule
from randclass.infrastructure.loader import MODULE_PREFIX, Loader

WriteLibrary = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _unload_libraries() -> Iterator[None]:
    """Drop modules registered by the loader during a test."""
    before = {name for name in sys.modules if name.startswith(MODULE_PREFIX)}
    yield
    for name in [n for n in sys.modules if n.startswith(MODULE_PREFIX)]:
        if name not in before:
            del sys.modules[name]


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root and randclass logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger("randclass")
    our_level = ours.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(our_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RANDCLASS_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("RANDCLASS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_library(tmp_path: Path) -> WriteLibrary:
    """Factory writing a library file into tmp_path.

    Usage: ``write_library("Foo.py", "class Bar: ...")``.
    """

    def _write(name: str, source: str = "", *, directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def load_source(tmp_path: Path) -> Callable[[str], LoadedModule]:
    """Write *source* to ``sample.py`` and return it loaded."""

    def _load(source: str, name: str = "sample.py") -> LoadedModule:
        (tmp_path / name).write_text(textwrap.dedent(source), encoding="utf-8")
        [loaded] = Loader(tmp_path).load_whitelist([name])
        return loaded

    return _load


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to tmp_path so the CLI scans an isolated directory.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
