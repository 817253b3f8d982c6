"""Class classification and enumeration over a loaded module.

A module "defines" a class when the class was created by the module's
own code at module level (or, for nested classes, directly inside such
a class). Imported classes, aliases, and classes created inside
functions are skipped.

Class-like means a regular class. Enums, protocols (interfaces) and
TypedDicts (annotation-only structs) are classified separately and
excluded.
"""

from __future__ import annotations

import enum
import inspect
import typing

from randclass.domain.models import ClassDescriptor, LoadedModule


def is_class_like(obj: object) -> bool:
    """Return True if *obj* is a class that is not an enum, protocol, or TypedDict."""
    if not inspect.isclass(obj):
        return False
    if issubclass(obj, enum.Enum):
        return False
    if getattr(obj, "_is_protocol", False):
        return False
    return not typing.is_typeddict(obj)


def _owned_members(owner: object, module_name: str, prefix: str) -> list[type]:
    """Classes bound on *owner* whose qualname places them directly under *prefix*."""
    found: list[type] = []
    for attr_name, obj in inspect.getmembers(owner, inspect.isclass):
        if obj.__module__ != module_name:
            continue  # imported
        expected = f"{prefix}.{attr_name}" if prefix else attr_name
        if obj.__qualname__ != expected:
            continue  # alias or locally-defined class
        found.append(obj)
    return found


def enumerate_classes(
    loaded: LoadedModule, *, include_nested: bool = True
) -> list[ClassDescriptor]:
    """Enumerate the class-like types defined by *loaded*.

    Members are visited in attribute-name order; nested classes follow
    their enclosing class. Enclosing classes that are not class-like
    (e.g. a protocol) are still searched for nested classes.
    """
    module_name = loaded.module_name
    descriptors: list[ClassDescriptor] = []

    def visit(owner: object, prefix: str) -> None:
        for cls in _owned_members(owner, module_name, prefix):
            if is_class_like(cls):
                descriptors.append(
                    ClassDescriptor(module_name=loaded.name, qualname=cls.__qualname__)
                )
            if include_nested:
                visit(cls, cls.__qualname__)

    visit(loaded.module, "")
    return descriptors
