"""
Fluent builder for chaining blocks.

Architecture:
- Block[T] - a single stage, AsyncIterable[T] -> AsyncIterator[T]
- Pipeline[T] - immutable ordered tuple of blocks; each builder call returns a new Pipeline
- Pipeline.apply(source) - folds the blocks left to right into one lazy sequence

Example:
    from seqblocks import Pipeline, lift as L

    pipeline = (
        Pipeline[str]()
        .insert_after_first(lambda post, i: i == 0, L.up.of("pinned"))
        .insert_after_every(lambda post, i: i % 10 == 9, fetch_ads)
    )

    async for item in pipeline.apply(posts):
        ...
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator
from dataclasses import dataclass

from ._helpers import closing
from ._types import IndexedPredicate, SequenceSource
from .blocks import Block, InsertAfterEveryItemLambdaBlock, InsertAfterFirstItemLambdaBlock


async def _passthrough[T](source: AsyncIterable[T]) -> AsyncIterator[T]:
    async with closing(aiter(source)) as items:
        async for item in items:
            yield item


@dataclass(frozen=True, slots=True)
class Pipeline[T]:
    """
    Ordered chain of blocks applied to a lazy sequence.
    """

    blocks: tuple[Block[T], ...] = ()

    def then(self, block: Block[T]) -> Pipeline[T]:
        if not isinstance(block, Block):
            raise TypeError(f"then(): expected a Block, got {type(block).__name__}")
        return Pipeline((*self.blocks, block))

    def insert_after_every(
        self,
        predicate: IndexedPredicate[T],
        sequence: SequenceSource[T],
    ) -> Pipeline[T]:
        return self.then(InsertAfterEveryItemLambdaBlock(predicate, sequence))

    def insert_after_first(
        self,
        predicate: IndexedPredicate[T],
        sequence: SequenceSource[T],
    ) -> Pipeline[T]:
        return self.then(InsertAfterFirstItemLambdaBlock(predicate, sequence))

    def apply(self, source: AsyncIterable[T]) -> AsyncIterator[T]:
        current: AsyncIterator[T] = _passthrough(source)
        for block in self.blocks:
            current = block.apply(current)
        return current


__all__ = ("Pipeline",)
