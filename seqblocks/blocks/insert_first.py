"""
Insert-after-first-item blocks
==============================

Вставка последовательности только после первого подходящего элемента.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator

from .._errors import InvalidPredicateError
from .._helpers import closing
from .._types import IndexedPredicate, SequenceSource
from .base import AddingBlock


class InsertAfterFirstItemBlock[T](AddingBlock[T]):
    """
    Inserts the additions after the first item matching `insert_after`, and only there.

    Once matched, `insert_after` is not called again for the rest of the traversal.
    The latch lives inside a single `apply` run, so applying the block twice
    starts from scratch each time.
    """

    async def apply(self, current: AsyncIterable[T]) -> AsyncIterator[T]:
        index = 0
        matched = False

        async with closing(aiter(current)) as items:
            async for item in items:
                yield item

                if not matched and self.insert_after(item, index):
                    matched = True

                    async with closing(aiter(self.sequence)) as additions:
                        async for inserted in additions:
                            yield inserted

                index += 1

    def insert_after(self, current: T, index: int) -> bool:
        """
        Decide whether the additions go right after `current` (and only that).

        `index` is the position of `current` in the primary sequence, starting at 0.
        """
        raise NotImplementedError


class InsertAfterFirstItemLambdaBlock[T](InsertAfterFirstItemBlock[T]):
    """Inserts the additions after the first item matching the given predicate."""

    def __init__(self, predicate: IndexedPredicate[T], sequence: SequenceSource[T]) -> None:
        if not callable(predicate):
            raise InvalidPredicateError(predicate)
        super().__init__(sequence)
        self._predicate = predicate

    def insert_after(self, current: T, index: int) -> bool:
        return self._predicate(current, index)


__all__ = ("InsertAfterFirstItemBlock", "InsertAfterFirstItemLambdaBlock")
