"""
Composable blocks over lazy async sequences.

A base sequence is run through a pipeline of blocks; each block consumes
the sequence produced by the previous one and yields a new lazy sequence.

Architecture:
- blocks.* - pipeline stages (insert after every / first matching item)
- Pipeline - fluent builder chaining blocks in order
- Replayable - re-iterable sequence of additions
- lift.up.* / lift.down.* - values into sequences and back
- writer - Log / WriterResult for writer-style consumption
"""

# Core types
from ._types import LCR, IndexedPredicate, SequenceFactory, SequenceSource

# Internal helpers (for custom blocks)
from . import _helpers

# Blocks
from . import blocks
from .blocks import (
    AddingBlock,
    Block,
    InsertAfterEveryItemBlock,
    InsertAfterEveryItemLambdaBlock,
    InsertAfterFirstItemBlock,
    InsertAfterFirstItemLambdaBlock,
)

# Builder
from .builder import Pipeline

# Re-iterable additions
from .replayable import Replayable, replayable

# Lift helpers (reduce boilerplate)
from . import lift

# Writer
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult

# Errors
from ._errors import InvalidPredicateError, SinglePassSequenceError

__all__ = (
    # Types
    "LCR",
    "IndexedPredicate",
    "SequenceFactory",
    "SequenceSource",
    # Internal helpers (for custom blocks)
    "_helpers",
    # Blocks
    "blocks",
    "Block",
    "AddingBlock",
    "InsertAfterEveryItemBlock",
    "InsertAfterEveryItemLambdaBlock",
    "InsertAfterFirstItemBlock",
    "InsertAfterFirstItemLambdaBlock",
    # Builder
    "Pipeline",
    # Replayable
    "Replayable",
    "replayable",
    # Lift module (namespace import - preferred)
    "lift",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    # Errors
    "InvalidPredicateError",
    "SinglePassSequenceError",
)
