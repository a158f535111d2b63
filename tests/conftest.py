from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass, field

import pytest


@dataclass
class Source[T]:
    """Async source that records every pull and whether it was closed."""

    items: tuple[T, ...]
    fail_at: int | None = None
    pulls: int = 0
    traversals: int = 0
    closed: bool = False
    events: list[str] = field(default_factory=list)

    async def __call__(self) -> AsyncIterator[T]:
        self.traversals += 1
        try:
            for position, item in enumerate(self.items):
                await asyncio.sleep(0)
                if self.fail_at == position:
                    raise RuntimeError(f"source failed at {position}")
                self.pulls += 1
                self.events.append(f"pull:{item}")
                yield item
        finally:
            self.closed = True


def source[T](items: Iterable[T], *, fail_at: int | None = None) -> Source[T]:
    return Source(tuple(items), fail_at=fail_at)


@pytest.fixture
def make_source():
    return source
