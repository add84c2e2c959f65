"""Tests for maintenance script helpers."""

from datetime import datetime
from pathlib import Path
from typing import Any, cast

import pytest
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import ColumnElement

from models import Post, User
from scripts import check_like_counters, seed
from services.engagement import record_like
from services.ingest import SAMPLE_RECORDS


def test_parse_positive_int_uses_default_for_blank_values() -> None:
    assert check_like_counters._parse_positive_int(None, default=20, label="LIMIT") == 20
    assert check_like_counters._parse_positive_int("  ", default=20, label="LIMIT") == 20


def test_parse_positive_int_rejects_zero() -> None:
    with pytest.raises(ValueError):
        check_like_counters._parse_positive_int(
            "0",
            default=20,
            label=check_like_counters.REPORT_LIMIT_ENV,
        )


def test_parse_positive_int_rejects_non_integers() -> None:
    with pytest.raises(ValueError, match="must be an integer"):
        check_like_counters._parse_positive_int("ten", default=20, label="LIMIT")


def test_seed_falls_back_to_sample_records() -> None:
    records, source = seed.resolve_seed_records(None)

    assert records == SAMPLE_RECORDS
    assert source == "bundled sample rows"


def test_seed_reads_csv_override(tmp_path: Path) -> None:
    csv_path = tmp_path / "social_media.csv"
    csv_path.write_text(
        "user_id,username,email,post_id,post_content,post_date,likes,comments\n"
        "1,johndoe,john@example.com,101,Just a test post.,2023-01-15 10:30:00,5,3\n",
        encoding="utf-8",
    )

    records, source = seed.resolve_seed_records(csv_path)

    assert [record.post_id for record in records] == [101]
    assert source == str(csv_path)


def test_seed_rejects_missing_csv(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        seed.resolve_seed_records(tmp_path / "missing.csv")


async def _seed_liked_posts(session: AsyncSession, post_ids: list[int]) -> None:
    session.add(User(id=1, username="counter_user", email="counter@example.com"))
    await session.flush()
    for post_id in post_ids:
        session.add(
            Post(
                id=post_id,
                user_id=1,
                content=f"post {post_id}",
                created_at=datetime(2023, 1, 15, 10, 30, 0),
            )
        )
    await session.commit()
    for post_id in post_ids:
        await record_like(session, post_id=post_id, user_id=1)


@pytest.mark.asyncio
async def test_check_like_counters_passes_on_consistent_database(
    session_maker: async_sessionmaker[AsyncSession],
    clean_database: None,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(check_like_counters, "AsyncSessionMaker", session_maker)
    async with session_maker() as session:
        await _seed_liked_posts(session, [101, 102])

    exit_code = await check_like_counters.run()

    assert exit_code == 0
    assert "Like counters consistent: drifted_posts=0" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_check_like_counters_reports_out_of_band_updates(
    session_maker: async_sessionmaker[AsyncSession],
    clean_database: None,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(check_like_counters, "AsyncSessionMaker", session_maker)
    monkeypatch.setenv(check_like_counters.REPORT_LIMIT_ENV, "1")
    async with session_maker() as session:
        await _seed_liked_posts(session, [101, 102, 103])
        await session.execute(
            update(Post)
            .where(cast(ColumnElement[bool], cast(Any, Post.id).in_([101, 102])))
            .values(likes_count=7)
        )
        await session.commit()

    exit_code = await check_like_counters.run()

    output = capsys.readouterr().out
    assert exit_code == 1
    assert "Post 101: likes_count=7, like_rows=1" in output
    assert "Post 102" not in output
    assert "... 1 more" in output
    assert "Like counters inconsistent: drifted_posts=2" in output
