"""
Log - Моноидный аккумулятор для Writer
======================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Log of entries recorded while a sequence is consumed.

    A list with monoid operations; `Log()` is the empty log,
    `combine` concatenates. Neither mutates the receiver.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log(items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs into a new one.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        """New log with `item` appended."""
        return Log([*self, item])


__all__ = ("Log",)
