"""
Replayable - re-iterable sequence of additions
==============================================

Блоки вставки проходят по добавляемой последовательности заново
при каждом совпадении, поэтому одноразовые итераторы не подходят.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from ._errors import SinglePassSequenceError
from ._helpers import traverse
from ._types import SequenceFactory, SequenceSource


class Replayable[T]:
    """
    Sequence that starts a fresh traversal every time it is iterated.

    Wraps a zero-arg factory; each `async for` calls the factory once.
    Sync results (lists, tuples, generators) are adapted to async iteration.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: SequenceFactory[T], /) -> None:
        self._factory = factory

    def __aiter__(self) -> AsyncIterator[T]:
        return traverse(self._factory())

    def __repr__(self) -> str:
        return f"Replayable({self._factory!r})"


def replayable[T](source: SequenceSource[T]) -> Replayable[T]:
    """
    Normalise a sequence source into a Replayable.

    - Replayable: returned as is
    - iterator / generator (sync or async): SinglePassSequenceError
    - re-iterable collection (sync or async): traversed from the start each time
    - zero-arg callable: used as the factory

    Example:
        replayable([1, 2])                       # list, re-iterable
        replayable(lambda: fetch_banner_items())  # async generator per traversal
        replayable(iter([1, 2]))                 # raises SinglePassSequenceError
    """
    if isinstance(source, Replayable):
        return source
    if isinstance(source, (AsyncIterator, Iterator)):
        raise SinglePassSequenceError(source)
    if isinstance(source, (AsyncIterable, Iterable)):
        return Replayable(lambda: source)
    if callable(source):
        return Replayable(source)
    raise TypeError(f"Cannot replay {type(source).__name__} object")


__all__ = ("Replayable", "replayable")
