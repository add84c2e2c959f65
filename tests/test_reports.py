"""Tests for engagement reports."""

from datetime import datetime
from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from core import settings
from models import User
from services.engagement import (
    ranked_engagement,
    top_engagement,
    user_engagement_report,
)
from services.ingest import SAMPLE_RECORDS, RawActivityRecord, load_raw_records


def make_record(
    user_id: int,
    post_id: int,
    *,
    likes: int,
    comments: int,
    post_date: str = "2023-01-15 10:00:00",
    username: str | None = None,
) -> RawActivityRecord:
    name = username or f"user_{user_id}"
    payload: dict[str, Any] = {
        "user_id": user_id,
        "username": name,
        "email": f"{name}@example.com",
        "post_id": post_id,
        "post_content": f"post {post_id}",
        "post_date": post_date,
        "likes": likes,
        "comments": comments,
    }
    return RawActivityRecord.model_validate(payload)


@pytest.mark.asyncio
async def test_top_engagement_orders_by_likes_then_comments(db_session: AsyncSession) -> None:
    await load_raw_records(db_session, SAMPLE_RECORDS)

    rows = await top_engagement(db_session, limit=10)

    assert len(rows) == 10
    keys = [(row.total_likes, row.total_comments) for row in rows]
    assert keys == sorted(keys, reverse=True)
    assert rows[0].post_id == 108
    assert rows[0].username == "brian_k"
    assert rows[0].email == "briank@mail.com"
    assert rows[0].total_likes == 22
    assert rows[0].total_comments == 11


@pytest.mark.asyncio
async def test_top_engagement_breaks_like_ties_on_comments(db_session: AsyncSession) -> None:
    await load_raw_records(
        db_session,
        [
            make_record(1, 201, likes=4, comments=1),
            make_record(2, 202, likes=4, comments=3),
            make_record(3, 203, likes=6, comments=0),
        ],
    )

    rows = await top_engagement(db_session)

    assert [row.post_id for row in rows] == [203, 202, 201]


@pytest.mark.asyncio
async def test_top_engagement_respects_limit(db_session: AsyncSession) -> None:
    await load_raw_records(db_session, SAMPLE_RECORDS)

    rows = await top_engagement(db_session, limit=3)

    assert [row.post_id for row in rows] == [108, 107, 104]


@pytest.mark.asyncio
async def test_top_engagement_includes_posts_without_activity(db_session: AsyncSession) -> None:
    await load_raw_records(
        db_session,
        [
            make_record(1, 201, likes=2, comments=0),
            make_record(2, 202, likes=0, comments=0),
        ],
    )

    rows = await top_engagement(db_session)

    assert [(row.post_id, row.total_likes, row.total_comments) for row in rows] == [
        (201, 2, 0),
        (202, 0, 0),
    ]


@pytest.mark.asyncio
async def test_top_engagement_rejects_non_positive_limit(db_session: AsyncSession) -> None:
    with pytest.raises(ValueError):
        await top_engagement(db_session, limit=0)


@pytest.mark.asyncio
async def test_ranked_engagement_scores_sample_posts(db_session: AsyncSession) -> None:
    await load_raw_records(db_session, SAMPLE_RECORDS)

    rows = await ranked_engagement(db_session)

    assert len(rows) == 10
    assert rows[0].post_id == 108
    assert rows[0].engagement_score == Decimal("18.7")
    assert rows[0].post_rank == 1
    scores = [row.engagement_score for row in rows]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.asyncio
async def test_ranked_engagement_shares_rank_on_ties(db_session: AsyncSession) -> None:
    # 0.7 * 3 + 0.3 * 0 == 0.7 * 0 + 0.3 * 7 == 2.1
    await load_raw_records(
        db_session,
        [
            make_record(1, 301, likes=10, comments=0),
            make_record(2, 302, likes=3, comments=0),
            make_record(3, 303, likes=0, comments=7),
            make_record(4, 304, likes=1, comments=0),
        ],
    )

    rows = await ranked_engagement(db_session)

    ranks = {row.post_id: (row.post_rank, row.engagement_score) for row in rows}
    assert ranks[301] == (1, Decimal("7.0"))
    assert ranks[302] == (2, Decimal("2.1"))
    assert ranks[303] == (2, Decimal("2.1"))
    assert ranks[304] == (4, Decimal("0.7"))
    assert [row.post_rank for row in rows] == [1, 2, 2, 4]


@pytest.mark.asyncio
async def test_ranked_engagement_includes_posts_without_activity(db_session: AsyncSession) -> None:
    await load_raw_records(
        db_session,
        [
            make_record(1, 401, likes=0, comments=0),
            make_record(2, 402, likes=0, comments=0),
        ],
    )

    rows = await ranked_engagement(db_session)

    assert [(row.post_id, row.post_rank, row.engagement_score) for row in rows] == [
        (401, 1, Decimal("0.0")),
        (402, 1, Decimal("0.0")),
    ]


@pytest.mark.asyncio
async def test_user_report_lists_posts_newest_first_per_user(db_session: AsyncSession) -> None:
    await load_raw_records(
        db_session,
        [
            make_record(1, 501, likes=1, comments=2, post_date="2023-01-15 09:00:00", username="bob"),
            make_record(1, 502, likes=3, comments=0, post_date="2023-01-16 09:00:00", username="bob"),
            make_record(2, 503, likes=0, comments=1, post_date="2023-01-14 09:00:00", username="alice"),
        ],
    )

    rows = await user_engagement_report(db_session)

    assert [(row.username, row.post_id) for row in rows] == [
        ("alice", 503),
        ("bob", 502),
        ("bob", 501),
    ]
    bob_latest = rows[1]
    assert bob_latest.post_date == datetime(2023, 1, 16, 9, 0, 0)
    assert bob_latest.total_likes == 3
    assert bob_latest.total_comments == 0
    assert rows[2].total_likes == 1
    assert rows[2].total_comments == 2


@pytest.mark.asyncio
async def test_user_report_keeps_users_without_posts(db_session: AsyncSession) -> None:
    await load_raw_records(db_session, [make_record(1, 601, likes=2, comments=1, username="carol")])
    db_session.add(User(id=2, username="dave", email="dave@example.com"))
    await db_session.commit()

    rows = await user_engagement_report(db_session)

    assert len(rows) == 2
    dave = rows[1]
    assert dave.username == "dave"
    assert dave.post_id is None
    assert dave.post_content is None
    assert dave.post_date is None
    assert dave.total_likes == 0
    assert dave.total_comments == 0


@pytest.mark.asyncio
async def test_top_engagement_defaults_to_configured_limit(
    db_session: AsyncSession,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    await load_raw_records(db_session, SAMPLE_RECORDS)
    monkeypatch.setattr(settings, "top_posts_limit", 2)

    rows = await top_engagement(db_session)

    assert [row.post_id for row in rows] == [108, 107]
