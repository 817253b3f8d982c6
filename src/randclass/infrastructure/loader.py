"""Library discovery and loading.

Discovery: every file in the working directory (non-recursive) whose
suffix is one of the configured library suffixes, or an explicit
whitelist of file names.

Each file is executed as a module via ``importlib.util`` and registered
in ``sys.modules`` under a ``randclass_lib_`` prefix, so a library named
``json.py`` never shadows the stdlib module.

INVARIANT: Loading is all-or-nothing. A failure rolls back every module
registered by the same call and raises LoadError. Two different files
with the same stem cannot be loaded by one call; the same file named
twice is loaded once and listed twice.
"""

from __future__ import annotations

import importlib.util
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from randclass.domain.errors import LoadError
from randclass.domain.models import LoadedModule

MODULE_PREFIX = "randclass_lib_"
DEFAULT_SUFFIXES: tuple[str, ...] = (".py",)

logger = logging.getLogger(__name__)


class Loader:
    """Loads library files into live modules."""

    def __init__(
        self,
        root: Path | None = None,
        *,
        suffixes: Iterable[str] = DEFAULT_SUFFIXES,
        skip_private: bool = False,
    ) -> None:
        self._root = root
        self._suffixes = frozenset(s.lower() for s in suffixes)
        self._skip_private = skip_private

    @property
    def root(self) -> Path:
        """Directory scanned by load_all() and used to resolve relative names."""
        return self._root if self._root is not None else Path.cwd()

    def discover(self) -> list[Path]:
        """Return library files in the root directory, sorted by name."""
        found: list[Path] = []
        for path in sorted(self.root.iterdir()):
            if not path.is_file() or path.suffix.lower() not in self._suffixes:
                continue
            if self._skip_private and path.name.startswith("_"):
                continue
            found.append(path)
        logger.debug("Discovered %d library file(s) in %s", len(found), self.root)
        return found

    def load_all(self) -> list[LoadedModule]:
        """Load every library file found in the root directory."""
        return self._load(self.discover())

    def load_whitelist(self, names: Sequence[str]) -> list[LoadedModule]:
        """Load exactly the named files, in order, trimming whitespace around each name."""
        paths: list[Path | str] = []
        for raw in names:
            name = raw.strip()
            # Path("") would silently mean the current directory.
            paths.append(self.root / name if name else name)
        return self._load(paths)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load(self, paths: Sequence[Path | str]) -> list[LoadedModule]:
        loaded: list[LoadedModule] = []
        by_name: dict[str, LoadedModule] = {}
        try:
            for path in paths:
                item = self._load_one(path, by_name)
                by_name[item.module_name] = item
                loaded.append(item)
        except LoadError:
            for name in by_name:
                sys.modules.pop(name, None)
            raise
        return loaded

    def _load_one(self, path: Path | str, by_name: dict[str, LoadedModule]) -> LoadedModule:
        if not path:
            raise LoadError(path) from ValueError("Empty library name.")

        path = Path(path)
        module_name = f"{MODULE_PREFIX}{path.stem}"
        previous = by_name.get(module_name)
        if previous is not None:
            # Printed names use the stem, so it must be unique per call.
            if previous.path.resolve() == path.resolve():
                return previous
            msg = f"Library name {path.stem!r} is already used by {previous.path}."
            raise LoadError(path) from ValueError(msg)

        try:
            spec = importlib.util.spec_from_file_location(module_name, path)
            if spec is None or spec.loader is None:
                msg = f"Not a loadable library file: {path.name}"
                raise ImportError(msg)
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            spec.loader.exec_module(module)
        except (Exception, SystemExit) as exc:
            # A library calling sys.exit() at import is a failed load, not our exit.
            sys.modules.pop(module_name, None)
            logger.debug("Failed to load library %s", path, exc_info=True)
            raise LoadError(path) from exc

        logger.debug("Loaded library %s as %s", path, module_name)
        return LoadedModule(name=path.stem, path=path, module=module)
