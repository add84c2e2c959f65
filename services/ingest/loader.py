"""Normalize raw activity records into users, posts, likes and comments."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from models import Comment, Like, Post, User
from services.engagement.counters import add_like
from services.errors import translate_integrity_error

from .expansion import SyntheticComment, SyntheticLike, expand_comments, expand_likes
from .records import RawActivityRecord
from .staging import StagedUser, stage_records

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadSummary:
    users_created: int = 0
    users_skipped: int = 0
    posts_created: int = 0
    posts_skipped: int = 0
    likes_created: int = 0
    comments_created: int = 0


async def _existing_ids(session: AsyncSession, column: ColumnElement[int], ids: list[int]) -> set[int]:
    if not ids:
        return set()
    result = await session.execute(select(column).where(column.in_(ids)))
    return {row[0] for row in result.all()}


async def _insert_users(session: AsyncSession, users: list[StagedUser]) -> list[StagedUser]:
    user_id_column = cast(ColumnElement[int], User.id)
    stored = await _existing_ids(session, user_id_column, [user.id for user in users])
    created = [user for user in users if user.id not in stored]
    for user in created:
        session.add(User(id=user.id, username=user.username, email=user.email))
    try:
        await session.flush()
    except IntegrityError as exc:
        raise translate_integrity_error(exc, entity="User") from exc
    return created


async def _insert_posts(
    session: AsyncSession,
    rows: list[RawActivityRecord],
) -> list[RawActivityRecord]:
    post_id_column = cast(ColumnElement[int], Post.id)
    stored = await _existing_ids(session, post_id_column, [row.post_id for row in rows])
    created = [row for row in rows if row.post_id not in stored]
    for row in created:
        session.add(
            Post(
                id=row.post_id,
                user_id=row.user_id,
                content=row.content,
                created_at=row.post_date,
            )
        )
    try:
        await session.flush()
    except IntegrityError as exc:
        raise translate_integrity_error(exc, entity="Post") from exc
    return created


async def insert_synthetic_events(
    session: AsyncSession,
    likes: Iterable[SyntheticLike],
    comments: Iterable[SyntheticComment],
) -> tuple[int, int]:
    """Insert expanded events in the caller's transaction.

    Likes go through the counter path one by one. Returns the number of likes
    and comments inserted.
    """
    like_total = 0
    comment_total = 0
    try:
        for event in likes:
            await add_like(
                session,
                Like(post_id=event.post_id, user_id=event.user_id, created_at=event.created_at),
            )
            like_total += 1
        for event in comments:
            session.add(
                Comment(
                    post_id=event.post_id,
                    user_id=event.user_id,
                    content=event.content,
                    created_at=event.created_at,
                )
            )
            comment_total += 1
        await session.flush()
    except IntegrityError as exc:
        raise translate_integrity_error(exc, entity="Activity event") from exc
    return like_total, comment_total


async def load_raw_records(
    session: AsyncSession,
    records: Iterable[RawActivityRecord],
) -> LoadSummary:
    """Load flat records in one transaction and return what was written.

    Users and posts already stored under the same identifier are left as they
    are; only posts created by this call get their likes and comments expanded.
    """
    staged = stage_records(records)
    summary = LoadSummary()

    try:
        created_users = await _insert_users(session, staged.users)
        created_rows = await _insert_posts(session, staged.rows)

        for row in created_rows:
            likes, comments = await insert_synthetic_events(
                session,
                expand_likes(row.post_id, row.user_id, row.like_count, row.post_date),
                expand_comments(row.post_id, row.user_id, row.comment_count, row.post_date),
            )
            summary.likes_created += likes
            summary.comments_created += comments
        await session.commit()
    except Exception:
        await session.rollback()
        logger.warning("Raw activity load rolled back", exc_info=True)
        raise

    summary.users_created = len(created_users)
    summary.users_skipped = staged.duplicate_user_rows + len(staged.users) - len(created_users)
    summary.posts_created = len(created_rows)
    summary.posts_skipped = staged.duplicate_post_rows + len(staged.rows) - len(created_rows)

    if summary.users_skipped or summary.posts_skipped:
        logger.debug(
            "Skipped duplicate identifiers during load",
            extra={
                "users_skipped": summary.users_skipped,
                "posts_skipped": summary.posts_skipped,
            },
        )
    logger.info(
        "Loaded raw activity records",
        extra={
            "users_created": summary.users_created,
            "posts_created": summary.posts_created,
            "likes_created": summary.likes_created,
            "comments_created": summary.comments_created,
        },
    )
    return summary
