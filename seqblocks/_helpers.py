"""Internal helpers for seqblocks.

Iteration plumbing shared by blocks, replayable sequences and lift helpers.
These are not part of the public API but can be used for writing custom blocks."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable
from types import TracebackType

# Closing wrapper for async iterators
class closing[T]:
    """
    Close the iterator on exit, if it knows how.

    Async generators are not closed by a `break` out of `async for`,
    so a block that stops early must close its upstream explicitly.
    Exceptions leaving the block pass through untouched.

    Usage:
        async with closing(aiter(source)) as items:
            async for item in items:
                ...
    """

    __slots__ = ("_iterator",)

    def __init__(self, iterator: AsyncIterator[T], /) -> None:
        self._iterator = iterator

    async def __aenter__(self) -> AsyncIterator[T]:
        return self._iterator

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        aclose = getattr(self._iterator, "aclose", None)
        if aclose is not None:
            await aclose()

# Uniform async traversal
async def traverse[T](items: AsyncIterable[T] | Iterable[T]) -> AsyncIterator[T]:
    """
    Iterate sync or async iterables with `async for`.

    Raises TypeError on the first pull if `items` is neither.
    """
    if isinstance(items, AsyncIterable):
        async with closing(aiter(items)) as iterator:
            async for item in iterator:
                yield item
    elif isinstance(items, Iterable):
        for item in items:
            yield item
    else:
        raise TypeError(f"{type(items).__name__} object is not iterable")

__all__ = (
    "closing",
    "traverse",
)
