"""Loaded library handles and the class descriptors derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType

from pydantic import BaseModel


@dataclass(frozen=True)
class LoadedModule:
    """A library file executed into a live module object.

    ``name`` is the file stem and serves as the namespace of every
    fully-qualified class name derived from this module.
    """

    name: str
    path: Path
    module: ModuleType = field(repr=False)

    @property
    def module_name(self) -> str:
        """Name the module is registered under in ``sys.modules``."""
        return self.module.__name__


class ClassDescriptor(BaseModel):
    """A class-like type defined by exactly one loaded module."""

    model_config = {"frozen": True}

    module_name: str
    qualname: str

    @property
    def full_name(self) -> str:
        """Module-qualified name, e.g. ``Foo.Bar`` or ``Foo.Outer.Inner``."""
        return f"{self.module_name}.{self.qualname}"
