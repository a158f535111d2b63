"""
Core type definitions for seqblocks.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Callable, Iterable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# IndexedPredicate = tests an item together with its position in the primary sequence
type IndexedPredicate[T] = Callable[[T, int], bool]

# SequenceFactory = zero-arg callable producing a fresh traversal
type SequenceFactory[T] = Callable[[], AsyncIterable[T] | Iterable[T]]

# SequenceSource = anything accepted as a sequence of additions
# NOTE: Iterators and generators are single-pass and rejected by replayable().
type SequenceSource[T] = AsyncIterable[T] | Iterable[T] | SequenceFactory[T]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "IndexedPredicate",
    "SequenceFactory",
    "SequenceSource",
    "LCR",
)
