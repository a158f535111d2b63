"""
Lift helpers with semantic namespaces.

    from seqblocks import lift as L

Architecture:
- L.up.*    - подъем значений в последовательность
- L.down.*  - опускание последовательности в значение

Examples:
    from seqblocks import lift as L

    ads = L.up.of("ad-1", "ad-2")
    feed = L.up.stream(posts)

    items = await L.down.unsafe(block.apply(feed))
    first = await L.down.take(block.apply(feed), 3)
    result = await L.down.to_list(block.apply(feed))
"""

from __future__ import annotations

from . import down
from . import up

from .down import take, to_list, to_list_w, unsafe
from .up import of, replay, stream

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "of",
    "replay",
    "stream",
    # Down
    "take",
    "to_list",
    "to_list_w",
    "unsafe",
)
