"""Maintenance script verifying cached post like counters.

Usage:
    python scripts/check_like_counters.py

Environment overrides:
    LIKE_DRIFT_REPORT_LIMIT=20

Exits with status 1 when any post's likes_count differs from its like rows.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from core import settings  # noqa: E402
from db.session import AsyncSessionMaker  # noqa: E402
from services.engagement import find_likes_count_drift  # noqa: E402

REPORT_LIMIT_ENV = "LIKE_DRIFT_REPORT_LIMIT"
DEFAULT_REPORT_LIMIT = 20


def _parse_positive_int(raw_value: str | None, *, default: int, label: str) -> int:
    if raw_value is None or raw_value.strip() == "":
        return default
    try:
        parsed = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{label} must be an integer") from exc
    if parsed <= 0:
        raise ValueError(f"{label} must be positive")
    return parsed


async def run() -> int:
    report_limit = _parse_positive_int(
        os.getenv(REPORT_LIMIT_ENV),
        default=DEFAULT_REPORT_LIMIT,
        label=REPORT_LIMIT_ENV,
    )

    async with AsyncSessionMaker() as session:
        drifts = await find_likes_count_drift(session)

    if not drifts:
        print("Like counters consistent: drifted_posts=0")
        return 0

    for drift in drifts[:report_limit]:
        print(
            f"Post {drift.post_id}: likes_count={drift.likes_count}, "
            f"like_rows={drift.actual_likes}"
        )
    if len(drifts) > report_limit:
        print(f"... {len(drifts) - report_limit} more")
    print(f"Like counters inconsistent: drifted_posts={len(drifts)}")
    return 1


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    raise SystemExit(asyncio.run(run()))


if __name__ == "__main__":
    main()
