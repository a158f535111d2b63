"""
Writer
======

LazyCoroResultWriter - ленивая корутина, возвращающая Result[T, E] вместе с Log[W].
Накопленный лог показывает, что успела выдать последовательность до ошибки.
"""

from .log import Log
from .monad import LazyCoroResultWriter, WriterResult

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
)
