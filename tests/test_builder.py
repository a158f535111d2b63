from __future__ import annotations

import pytest

from seqblocks import (
    InsertAfterEveryItemBlock,
    InsertAfterFirstItemLambdaBlock,
    Pipeline,
    lift as L,
)


class InsertAfterHeadings(InsertAfterEveryItemBlock[str]):
    def insert_after(self, current: str, index: int) -> bool:
        return current.startswith("#")


@pytest.mark.asyncio
async def test_empty_pipeline_passes_items_through() -> None:
    result = await L.down.unsafe(Pipeline[int]().apply(L.up.stream([1, 2, 3])))

    assert result == [1, 2, 3]


@pytest.mark.asyncio
async def test_blocks_apply_in_order() -> None:
    pipeline = (
        Pipeline[str]()
        .insert_after_first(lambda item, i: i == 0, ["intro"])
        .insert_after_every(lambda item, i: item == "intro", ["!"])
    )

    result = await L.down.unsafe(pipeline.apply(L.up.stream(["title", "body"])))

    assert result == ["title", "intro", "!", "body"]


@pytest.mark.asyncio
async def test_later_block_sees_earlier_insertions_as_primary_items() -> None:
    seen: list[tuple[str, int]] = []

    def predicate(item: str, index: int) -> bool:
        seen.append((item, index))
        return False

    pipeline = (
        Pipeline[str]()
        .insert_after_every(lambda item, i: True, ["-"])
        .insert_after_every(predicate, ["never"])
    )

    await L.down.unsafe(pipeline.apply(L.up.stream(["a", "b"])))

    assert seen == [("a", 0), ("-", 1), ("b", 2), ("-", 3)]


@pytest.mark.asyncio
async def test_then_accepts_custom_blocks() -> None:
    pipeline = Pipeline[str]().then(InsertAfterHeadings(["---"]))

    result = await L.down.unsafe(pipeline.apply(L.up.stream(["# A", "text", "# B"])))

    assert result == ["# A", "---", "text", "# B", "---"]


def test_builder_is_immutable() -> None:
    base = Pipeline[int]()
    extended = base.then(InsertAfterFirstItemLambdaBlock(lambda item, i: True, [0]))

    assert base.blocks == ()
    assert len(extended.blocks) == 1


def test_then_rejects_non_blocks() -> None:
    with pytest.raises(TypeError):
        Pipeline[int]().then(lambda seq: seq)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_pipeline_is_lazy(make_source) -> None:
    source = make_source([1, 2])
    pipeline = Pipeline[int]().insert_after_every(lambda item, i: True, [0])

    output = pipeline.apply(source())

    assert source.pulls == 0
    assert await L.down.take(output, 2) == [1, 0]
    assert source.pulls == 1
    assert source.closed
