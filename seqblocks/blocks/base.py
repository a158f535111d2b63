"""
Block contracts
===============

A block is a single pipeline stage: it turns one lazy sequence into another.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator

from .._types import SequenceSource
from ..replayable import Replayable, replayable


class Block[T]:
    """
    Pipeline stage that can be applied to a lazy sequence.

    `apply` must stay lazy: nothing is pulled from `current`
    until the returned sequence is iterated.
    """

    def apply(self, current: AsyncIterable[T]) -> AsyncIterator[T]:
        raise NotImplementedError


class AddingBlock[T](Block[T]):
    """
    Block that splices a sequence of additions into the current sequence.

    The additions are stored as a Replayable so every insertion
    traverses them from the start. Single-pass sources are rejected here,
    at construction time.
    """

    sequence: Replayable[T]

    def __init__(self, sequence: SequenceSource[T]) -> None:
        self.sequence = replayable(sequence)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sequence!r})"


__all__ = ("Block", "AddingBlock")
