from .base import AddingBlock, Block
from .insert_every import InsertAfterEveryItemBlock, InsertAfterEveryItemLambdaBlock
from .insert_first import InsertAfterFirstItemBlock, InsertAfterFirstItemLambdaBlock

__all__ = (
    # Contracts
    "Block",
    "AddingBlock",
    # Insert after every matching item
    "InsertAfterEveryItemBlock",
    "InsertAfterEveryItemLambdaBlock",
    # Insert after the first matching item
    "InsertAfterFirstItemBlock",
    "InsertAfterFirstItemLambdaBlock",
)
