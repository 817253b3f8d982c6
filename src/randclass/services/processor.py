"""Processor: orchestrates load → pick module → pick class.

Usage::

    processor = Processor(Loader(), rng=random.Random(42))
    result = processor.process_whitelist(["models.py", "views.py"])
    if result.ok:
        print(result.data["name"])

The processor is the single recovery point of the pipeline: whatever a
stage raises is caught here and returned as a failed ServiceResult.
There is no retry and no partial recovery.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from randclass.domain.finders import ClassFinder, ModuleFinder
from randclass.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from randclass.domain.models import LoadedModule
    from randclass.infrastructure.loader import Loader

logger = logging.getLogger(__name__)


class Processor:
    """Finds one random class among the classes of a set of libraries."""

    def __init__(
        self,
        loader: Loader,
        *,
        rng: random.Random | None = None,
        include_nested: bool = True,
    ) -> None:
        self._loader = loader
        self._rng = rng if rng is not None else random.Random()
        self._module_finder = ModuleFinder(self._rng)
        self._class_finder = ClassFinder(self._rng, include_nested=include_nested)

    def process_all(self) -> ServiceResult:
        """Pick a random class from every library in the loader's directory."""
        return self._find("process_all", self._loader.load_all)

    def process_whitelist(self, names: Sequence[str]) -> ServiceResult:
        """Pick a random class from exactly the named libraries."""
        return self._find("process_whitelist", lambda: self._loader.load_whitelist(names))

    def _find(self, op: str, load: Callable[[], list[LoadedModule]]) -> ServiceResult:
        try:
            modules = load()
            logger.debug("Loaded %d module(s)", len(modules))
            module = self._module_finder.find_random(modules)
            logger.debug("Picked module %s", module.name)
            chosen = self._class_finder.pick_class(module)
        except Exception as exc:
            logger.debug("%s failed", op, exc_info=True)
            return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": chosen.full_name,
                "module": module.name,
                "path": str(module.path),
                "module_count": len(modules),
            },
        )
