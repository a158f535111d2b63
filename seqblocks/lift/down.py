"""
Опускание последовательности в значение.

Functions for draining a lazy sequence into a list, a Result or a WriterResult.
"""

from __future__ import annotations

from collections.abc import AsyncIterable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import closing
from .._types import LCR
from ..writer import LazyCoroResultWriter, Log, WriterResult


async def unsafe[T](sequence: AsyncIterable[T]) -> list[T]:
    """
    Drain the sequence into a list, raising whatever the sequence raises.

    Example:
        from seqblocks import lift as L

        items = await L.down.unsafe(block.apply(L.up.stream([1, 2, 3])))
    """
    async with closing(aiter(sequence)) as iterator:
        return [item async for item in iterator]


async def take[T](sequence: AsyncIterable[T], n: int) -> list[T]:
    """
    Pull at most `n` items, then close the sequence.

    Closing propagates upstream through every block, so nothing past
    the n-th item is produced and the sources get to run their cleanup.
    """
    if n < 0:
        raise ValueError("take(): n must be >= 0")

    items: list[T] = []
    if n == 0:
        return items

    async with closing(aiter(sequence)) as iterator:
        async for item in iterator:
            items.append(item)
            if len(items) >= n:
                break
    return items


def to_list[T](sequence: AsyncIterable[T]) -> LCR[list[T], Exception]:
    """
    Drain lazily into a Result instead of raising.

    **When to use:** Sources that may fail and callers that prefer Result.

    Example:
        match await L.down.to_list(pipeline.apply(source)):
            case Ok(items): ...
            case Error(exc): ...

    NOTE: Nothing runs until awaited, and every await drains `sequence` again.
          An async generator (what `block.apply` returns) is exhausted by the
          first await, so a second await returns Ok([]). Await once, or pass
          a re-iterable sequence such as a Replayable.
    """

    async def run() -> Result[list[T], Exception]:
        try:
            return Ok(await unsafe(sequence))
        except Exception as exc:
            return Error(exc)

    return LazyCoroResult(run)


def to_list_w[T](sequence: AsyncIterable[T]) -> LazyCoroResultWriter[list[T], Exception, T]:
    """
    Drain into a WriterResult whose log records every delivered item.

    On failure the result is Error and the log keeps the truncated
    output produced before it, which is what the consumer actually saw.

    Example:
        wr = await L.down.to_list_w(block.apply(source))
        match wr.result:
            case Ok(items): ...
            case Error(exc): print(f"failed after {list(wr.log)!r}: {exc}")

    NOTE: Same re-run rule as to_list: a second await on an exhausted
          async generator gives Ok([]) with an empty log.
    """

    async def run() -> WriterResult[list[T], Exception, Log[T]]:
        seen: list[T] = []
        try:
            async with closing(aiter(sequence)) as iterator:
                async for item in iterator:
                    seen.append(item)
        except Exception as exc:
            return WriterResult(Error(exc), Log[T](seen))
        return WriterResult(Ok(seen), Log[T](seen))

    return LazyCoroResultWriter(run)


__all__ = (
    "unsafe",
    "take",
    "to_list",
    "to_list_w",
)
