"""Error taxonomy for the load → pick module → pick class pipeline.

Every stage raises one of these; the processor is the single place
they are caught and turned into a failed ServiceResult.
"""

from __future__ import annotations

from pathlib import Path


class RandclassError(Exception):
    """Base class for all randclass pipeline errors."""


class LoadError(RandclassError):
    """A library file could not be opened, parsed, or executed.

    Always raised ``from`` the underlying cause so the chain survives
    to the failure report.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not load library {str(path)!r}.")


class NoModulesError(RandclassError):
    """The resolved set of modules is empty."""

    def __init__(self) -> None:
        super().__init__("No modules.")


class NoClassesError(RandclassError):
    """The selected module defines no class-like types."""

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(f"Module {module_name!r} defines no classes.")
