"""Tests for class classification and enumeration."""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable

from randclass.domain.classes import enumerate_classes, is_class_like
from randclass.domain.models import LoadedModule


class _Plain:
    pass


class _Shape(typing.Protocol):
    def area(self) -> float: ...


class _Square(_Shape):
    def area(self) -> float:
        return 1.0


class _Color(enum.Enum):
    RED = 1


class _Point(typing.TypedDict):
    x: int


class _Pair(typing.NamedTuple):
    left: int
    right: int


class TestIsClassLike:
    def test_plain_class(self) -> None:
        assert is_class_like(_Plain) is True

    def test_not_a_class(self) -> None:
        assert is_class_like(_Plain()) is False
        assert is_class_like(len) is False

    def test_enum_excluded(self) -> None:
        assert is_class_like(_Color) is False

    def test_int_enum_excluded(self) -> None:
        assert is_class_like(enum.IntEnum("Level", "LOW HIGH")) is False

    def test_protocol_excluded(self) -> None:
        assert is_class_like(_Shape) is False

    def test_protocol_implementation_included(self) -> None:
        assert is_class_like(_Square) is True

    def test_typeddict_excluded(self) -> None:
        assert is_class_like(_Point) is False

    def test_namedtuple_included(self) -> None:
        assert is_class_like(_Pair) is True

    def test_exception_class_included(self) -> None:
        assert is_class_like(ValueError) is True


class TestEnumerateClasses:
    def test_sorted_by_name(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source(
            """\
            class Zeta:
                pass

            class Alpha:
                pass
            """
        )
        assert [d.qualname for d in enumerate_classes(loaded)] == ["Alpha", "Zeta"]

    def test_full_name_uses_file_stem(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source("class Bar:\n    pass\n", name="Foo.py")
        [descriptor] = enumerate_classes(loaded)
        assert descriptor.full_name == "Foo.Bar"

    def test_imported_classes_skipped(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source(
            """\
            from collections import OrderedDict
            from pathlib import Path

            class Local:
                pass
            """
        )
        assert [d.qualname for d in enumerate_classes(loaded)] == ["Local"]

    def test_aliases_skipped(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source(
            """\
            class Original:
                pass

            Alias = Original
            """
        )
        assert [d.qualname for d in enumerate_classes(loaded)] == ["Original"]

    def test_function_local_classes_skipped(
        self, load_source: Callable[..., LoadedModule]
    ) -> None:
        loaded = load_source(
            """\
            def make():
                class Hidden:
                    pass
                return Hidden

            Made = make()
            """
        )
        assert enumerate_classes(loaded) == []

    def test_nested_follow_enclosing(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source(
            """\
            class Outer:
                class Inner:
                    class Deepest:
                        pass

            class Later:
                pass
            """
        )
        names = [d.full_name for d in enumerate_classes(loaded)]
        assert names == [
            "sample.Later",
            "sample.Outer",
            "sample.Outer.Inner",
            "sample.Outer.Inner.Deepest",
        ]

    def test_nested_inside_protocol_still_found(
        self, load_source: Callable[..., LoadedModule]
    ) -> None:
        loaded = load_source(
            """\
            from typing import Protocol

            class Plugin(Protocol):
                class Options:
                    pass
            """
        )
        assert [d.full_name for d in enumerate_classes(loaded)] == ["sample.Plugin.Options"]

    def test_inherited_nested_not_repeated(
        self, load_source: Callable[..., LoadedModule]
    ) -> None:
        loaded = load_source(
            """\
            class Base:
                class Meta:
                    pass

            class Child(Base):
                pass
            """
        )
        names = [d.qualname for d in enumerate_classes(loaded)]
        assert names == ["Base", "Base.Meta", "Child"]

    def test_enums_and_protocols_skipped(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source(
            """\
            import enum
            from typing import Protocol, TypedDict

            class Kind(enum.Enum):
                A = 1

            class Drawable(Protocol):
                def draw(self) -> None: ...

            class Row(TypedDict):
                id: int

            class Canvas:
                pass
            """
        )
        assert [d.qualname for d in enumerate_classes(loaded)] == ["Canvas"]

    def test_dataclass_included(self, load_source: Callable[..., LoadedModule]) -> None:
        loaded = load_source(
            """\
            from dataclasses import dataclass

            @dataclass
            class Record:
                id: int
            """
        )
        assert [d.qualname for d in enumerate_classes(loaded)] == ["Record"]
