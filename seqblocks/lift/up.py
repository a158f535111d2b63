"""
Подъем значений в последовательности.

Functions for turning plain values and iterables into lazy sequences
that blocks can consume.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable

from .._types import SequenceSource
from ..replayable import Replayable, replayable


def of[T](*items: T) -> Replayable[T]:
    """
    Fixed sequence of items, re-iterable.

    **When to use:** Additions known up front.

    Example:
        from seqblocks import lift as L

        separator = L.up.of("---")
        block = InsertAfterEveryItemLambdaBlock(lambda line, i: line == "", separator)
    """
    return Replayable(lambda: items)


def replay[T](source: SequenceSource[T]) -> Replayable[T]:
    """
    Re-iterable view of a collection or factory.

    **When to use:** Additions produced by an async source. Pass the factory,
    not the generator it returns:

        L.up.replay(fetch_ads)      # ✅ fresh traversal per insertion
        L.up.replay(fetch_ads())    # ❌ SinglePassSequenceError
    """
    return replayable(source)


async def stream[T](items: Iterable[T]) -> AsyncIterator[T]:
    """
    Single-pass async view of a sync iterable.

    **When to use:** Feeding an in-memory primary sequence to a block.
    Items are pulled from `items` one at a time, on demand.
    """
    for item in items:
        yield item


__all__ = (
    "of",
    "replay",
    "stream",
)
