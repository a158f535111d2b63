from __future__ import annotations

from _infra import FakeFeed, Post, banner, run

from seqblocks import InsertAfterEveryItemLambdaBlock, lift as L
from kungfu import Error, Ok


async def main() -> None:
    banner("02_writer_logs: a failing feed still shows what was delivered")

    feed = FakeFeed(name="flaky", size=6, delay_seconds=0.01, fail_after=4)
    separator = L.up.of(Post(id=-1, title="~~~"))
    block = InsertAfterEveryItemLambdaBlock(lambda post, i: i % 2 == 1, separator)

    wr = await L.down.to_list_w(block.apply(feed.posts())).map(len)
    match wr.result:
        case Ok(count):
            print(f"ok: {count} items")
        case Error(err):
            print(f"error: {err}")
    print(f"delivered: {[post.title for post in wr.log]!r}")


if __name__ == "__main__":
    run(main)
