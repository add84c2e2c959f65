"""Load the raw social-media activity dataset into the configured database.

Usage:
    python scripts/seed.py

Optional CSV override:
    SEED_CSV_PATH=/absolute/path/to/social_media.csv python scripts/seed.py

The CSV must carry the raw export's headers:
    user_id,username,email,post_id,post_content,post_date,likes,comments

Without a CSV the bundled sample rows are loaded. Rows whose user or post
identifier is already stored are skipped, so re-running is safe.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from core import settings  # noqa: E402
from db.session import AsyncSessionMaker  # noqa: E402
from services.engagement import top_engagement  # noqa: E402
from services.ingest import (  # noqa: E402
    SAMPLE_RECORDS,
    RawActivityRecord,
    load_raw_records,
    read_activity_csv,
)


def resolve_seed_records(csv_path: Path | None) -> tuple[Sequence[RawActivityRecord], str]:
    if csv_path is None:
        return SAMPLE_RECORDS, "bundled sample rows"
    if not csv_path.is_file():
        raise FileNotFoundError(f"SEED_CSV_PATH does not point to a file: {csv_path}")
    return read_activity_csv(csv_path), str(csv_path)


async def seed() -> None:
    records, source = resolve_seed_records(settings.seed_csv_path)

    async with AsyncSessionMaker() as session:
        summary = await load_raw_records(session, records)
        top_posts = await top_engagement(session)

    print(f"Seed data loaded from {source}.")
    print(f"   Users: {summary.users_created} created, {summary.users_skipped} skipped")
    print(f"   Posts: {summary.posts_created} created, {summary.posts_skipped} skipped")
    print(f"   Likes: {summary.likes_created}")
    print(f"   Comments: {summary.comments_created}")
    if top_posts:
        leader = top_posts[0]
        print(
            f"   Top post: #{leader.post_id} by {leader.username} "
            f"({leader.total_likes} likes, {leader.total_comments} comments)"
        )


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
