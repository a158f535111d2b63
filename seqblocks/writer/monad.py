"""LazyCoroResultWriter

WriterResult pairs a Result[T, E] with a Log[W];
LazyCoroResultWriter is the lazy coroutine producing one.
Used by writer-style consumers of sequences (see lift.down.to_list_w)."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from kungfu import Result

from .log import Log

@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """
    Outcome of draining a sequence together with what was seen on the way.

    On failure `result` is Error and `log` still holds every item
    delivered before the failure.
    """

    result: Result[T, E]
    log: W

class LazyCoroResultWriter[T, E, W]:
    """Deferred computation of a WriterResult.

    Nothing runs until the writer is awaited (or called and awaited),
    and every await runs the computation again.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._value = value

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        """Apply function to success value, preserve log."""

        async def wrapper() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(wrapper)

    def map_log[V](self, f: Callable[[Log[W]], Log[V]], /) -> LazyCoroResultWriter[T, E, V]:
        """Transform the log, e.g. to render delivered items for a report."""

        async def wrapper() -> WriterResult[T, E, Log[V]]:
            wr = await self()
            return WriterResult(wr.result, f(wr.log))

        return LazyCoroResultWriter(wrapper)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries to the log without changing the result."""

        async def wrapper() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(wrapper)

    def unwrap(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Unwrap the value, raising on error. Loses the log."""

        async def inner() -> T:
            wr = await self()
            return wr.result.unwrap()

        return inner()

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()

__all__ = ("LazyCoroResultWriter", "WriterResult")
