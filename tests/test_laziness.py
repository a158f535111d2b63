from __future__ import annotations

import pytest

from seqblocks import (
    InsertAfterEveryItemLambdaBlock,
    InsertAfterFirstItemLambdaBlock,
    lift as L,
)


@pytest.mark.asyncio
async def test_apply_pulls_nothing_until_iterated(make_source) -> None:
    primary = make_source([1, 2, 3])
    block = InsertAfterEveryItemLambdaBlock(lambda item, i: True, ["x"])

    output = block.apply(primary())

    assert primary.pulls == 0
    assert await anext(output) == 1
    assert primary.pulls == 1

    await output.aclose()
    assert primary.closed


@pytest.mark.asyncio
async def test_predicate_runs_after_item_is_delivered(make_source) -> None:
    primary = make_source(["a", "b"])
    calls: list[int] = []

    def predicate(item: str, index: int) -> bool:
        calls.append(index)
        return False

    output = InsertAfterEveryItemLambdaBlock(predicate, ["x"]).apply(primary())

    assert await anext(output) == "a"
    assert calls == []

    assert await anext(output) == "b"
    assert calls == [0]

    await output.aclose()


@pytest.mark.asyncio
async def test_strict_interleaving_of_pulls(make_source) -> None:
    primary = make_source(["p1", "p2"])
    additions = make_source(["s1", "s2"])
    events = []
    primary.events = events
    additions.events = events

    block = InsertAfterEveryItemLambdaBlock(lambda item, i: item == "p1", additions)
    result = await L.down.unsafe(block.apply(primary()))

    assert result == ["p1", "s1", "s2", "p2"]
    assert events == ["pull:p1", "pull:s1", "pull:s2", "pull:p2"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "block_type",
    [InsertAfterEveryItemLambdaBlock, InsertAfterFirstItemLambdaBlock],
)
async def test_early_stop_closes_primary(make_source, block_type) -> None:
    primary = make_source(range(100))
    block = block_type(lambda item, i: i == 0, ["x"])

    result = await L.down.take(block.apply(primary()), 3)

    assert result == [0, "x", 1]
    assert primary.pulls == 2
    assert primary.closed


@pytest.mark.asyncio
async def test_early_stop_during_insertion_closes_additions(make_source) -> None:
    primary = make_source([1, 2])
    additions = make_source(["a", "b", "c"])
    block = InsertAfterEveryItemLambdaBlock(lambda item, i: True, additions)

    result = await L.down.take(block.apply(primary()), 2)

    assert result == [1, "a"]
    assert additions.pulls == 1
    assert additions.closed
    assert primary.closed
    assert primary.pulls == 1


@pytest.mark.asyncio
async def test_take_zero_pulls_nothing(make_source) -> None:
    primary = make_source([1])
    block = InsertAfterFirstItemLambdaBlock(lambda item, i: True, ["x"])

    assert await L.down.take(block.apply(primary()), 0) == []
    assert primary.pulls == 0


@pytest.mark.asyncio
async def test_take_rejects_negative() -> None:
    with pytest.raises(ValueError):
        await L.down.take(L.up.stream([1]), -1)
