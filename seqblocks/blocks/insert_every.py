"""
Insert-after-every-item blocks
==============================

Вставка последовательности после каждого элемента, удовлетворяющего предикату.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator

from .._errors import InvalidPredicateError
from .._helpers import closing
from .._types import IndexedPredicate, SequenceSource
from .base import AddingBlock


class InsertAfterEveryItemBlock[T](AddingBlock[T]):
    """
    Inserts the additions after every item matching `insert_after`.

    Subclass and override `insert_after` for fixed logic,
    or use InsertAfterEveryItemLambdaBlock with a function.
    """

    async def apply(self, current: AsyncIterable[T]) -> AsyncIterator[T]:
        index = 0

        async with closing(aiter(current)) as items:
            async for item in items:
                yield item

                matches = self.insert_after(item, index)
                index += 1

                if matches:
                    async with closing(aiter(self.sequence)) as additions:
                        async for inserted in additions:
                            yield inserted

    def insert_after(self, current: T, index: int) -> bool:
        """
        Decide whether the additions go right after `current`.

        `index` is the position of `current` in the primary sequence,
        starting at 0; inserted items are not counted.
        """
        raise NotImplementedError


class InsertAfterEveryItemLambdaBlock[T](InsertAfterEveryItemBlock[T]):
    """Inserts the additions after every item matching the given predicate."""

    def __init__(self, predicate: IndexedPredicate[T], sequence: SequenceSource[T]) -> None:
        if not callable(predicate):
            raise InvalidPredicateError(predicate)
        super().__init__(sequence)
        self._predicate = predicate

    def insert_after(self, current: T, index: int) -> bool:
        return self._predicate(current, index)


__all__ = ("InsertAfterEveryItemBlock", "InsertAfterEveryItemLambdaBlock")
