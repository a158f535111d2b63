from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class FeedUnavailable(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class Post:
    id: int
    title: str
    sponsored: bool = False


@dataclass(slots=True)
class FakeFeed:
    name: str
    size: int
    delay_seconds: float = 0.0
    fail_after: int | None = None

    async def posts(self) -> AsyncIterator[Post]:
        for n in range(self.size):
            await asyncio.sleep(self.delay_seconds)
            if self.fail_after is not None and n >= self.fail_after:
                raise FeedUnavailable(f"{self.name}: connection dropped at post {n}")
            yield Post(id=n, title=f"{self.name} post #{n}")


@dataclass(slots=True)
class FakeAds:
    delay_seconds: float = 0.0
    served: int = 0

    async def fetch(self) -> AsyncIterator[Post]:
        await asyncio.sleep(self.delay_seconds)
        self.served += 1
        yield Post(id=-self.served, title=f"ad #{self.served}", sponsored=True)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
