"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, randclass.toml only contains
overrides. An empty (or absent) file is a valid configuration.
"""

from __future__ import annotations

import importlib.machinery

from pydantic import BaseModel, field_validator

# Suffixes importlib can execute under an arbitrary module name.
LOADABLE_SUFFIXES = frozenset(
    importlib.machinery.SOURCE_SUFFIXES + importlib.machinery.BYTECODE_SUFFIXES
)


class LoaderConfig(BaseModel):
    """[loader] section."""

    model_config = {"frozen": True}

    suffixes: tuple[str, ...] = (".py",)
    skip_private: bool = False

    @field_validator("suffixes")
    @classmethod
    def _check_suffixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            msg = "at least one library suffix is required"
            raise ValueError(msg)
        normalized = tuple(s.lower() if s.startswith(".") else f".{s.lower()}" for s in value)
        unknown = sorted(set(normalized) - LOADABLE_SUFFIXES)
        if unknown:
            msg = f"unsupported library suffix(es): {', '.join(unknown)}"
            raise ValueError(msg)
        return normalized


class ClassesConfig(BaseModel):
    """[classes] section."""

    model_config = {"frozen": True}

    include_nested: bool = True

