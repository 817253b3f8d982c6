"""Uniform random selection of a module, then of a class within it.

Both finders draw from a ``random.Random`` handed to them at
construction. The processor passes the same instance to both, so a
seeded generator makes a whole run reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from randclass.domain.classes import enumerate_classes
from randclass.domain.errors import NoClassesError, NoModulesError
from randclass.domain.models import ClassDescriptor, LoadedModule


class ModuleFinder:
    """Finds a random module from many."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def find_random(self, modules: Sequence[LoadedModule] | None) -> LoadedModule:
        """Return an element of *modules* at a uniformly random index.

        Raises:
            NoModulesError: If *modules* is None or empty.
        """
        if not modules:
            raise NoModulesError()
        return modules[self._rng.randrange(len(modules))]


class ClassFinder:
    """Finds a random class from a module."""

    def __init__(self, rng: random.Random, *, include_nested: bool = True) -> None:
        self._rng = rng
        self._include_nested = include_nested

    def find_classes(self, module: LoadedModule) -> list[ClassDescriptor]:
        return enumerate_classes(module, include_nested=self._include_nested)

    def pick_class(self, module: LoadedModule) -> ClassDescriptor:
        """Pick one class-like type of *module* uniformly at random.

        Raises:
            NoClassesError: If the module defines no class-like types.
        """
        classes = self.find_classes(module)
        if not classes:
            raise NoClassesError(module.name)
        return classes[self._rng.randrange(len(classes))]

    def find_random_class(self, module: LoadedModule) -> str:
        """Return the fully-qualified name of a random class of *module*."""
        return self.pick_class(module).full_name
