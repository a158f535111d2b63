from __future__ import annotations

from _infra import FakeAds, FakeFeed, Post, banner, run

from seqblocks import Pipeline, lift as L


async def main() -> None:
    banner("01_quickstart: pinned post + an ad after every third post")

    feed = FakeFeed(name="news", size=7, delay_seconds=0.01)
    ads = FakeAds(delay_seconds=0.01)
    pinned = L.up.of(Post(id=0, title="welcome, read the rules"))

    pipeline = (
        Pipeline[Post]()
        .insert_after_first(lambda post, i: i == 0, pinned)
        # ads.fetch is a factory: each insertion asks for a fresh ad
        .insert_after_every(lambda post, i: i % 3 == 2 and not post.sponsored, ads.fetch)
    )

    async for post in pipeline.apply(feed.posts()):
        marker = "$" if post.sponsored else "-"
        print(f"{marker} {post.title}")

    print(f"ads served: {ads.served}")


if __name__ == "__main__":
    run(main)
