from __future__ import annotations

class SinglePassSequenceError(TypeError):
    """Additions can only be traversed once, but a block may need them many times."""

    sequence: object

    def __init__(self, sequence: object) -> None:
        self.sequence = sequence
        super().__init__(
            f"{type(sequence).__name__} is single-pass; "
            "pass a re-iterable collection or a zero-arg factory instead"
        )

class InvalidPredicateError(TypeError):
    """Predicate given to a lambda block is not callable."""

    predicate: object

    def __init__(self, predicate: object) -> None:
        self.predicate = predicate
        super().__init__(f"Predicate must be callable, got {type(predicate).__name__}")

__all__ = ("InvalidPredicateError", "SinglePassSequenceError")
