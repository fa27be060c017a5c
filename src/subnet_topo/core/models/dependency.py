"""依赖聚合模块"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class Dependable(Protocol):
    """可被依赖的对象"""

    @property
    def dependency_elements(self) -> Sequence[Any]:
        """构成该对象的依赖项"""
        ...


class DependencyList:
    """把一组依赖项作为单个可依赖对象暴露"""

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any] = ()):
        self._elements: Tuple[Any, ...] = tuple(elements)

    @property
    def dependency_elements(self) -> Tuple[Any, ...]:
        return self._elements

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"DependencyList({list(self._elements)!r})"
