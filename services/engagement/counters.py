"""Like/comment writes and maintenance of the cached post like counter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, cast

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.util import identity_key
from sqlalchemy.orm.attributes import set_committed_value
from sqlalchemy.sql import ColumnElement

from models import Comment, Like, Post
from services.errors import translate_integrity_error

from .common import eq, ne, utcnow

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LikesCountDrift:
    post_id: int
    likes_count: int
    actual_likes: int


async def add_like(session: AsyncSession, like: Like) -> Like:
    """Insert ``like`` and bump its post's counter inside the caller's transaction.

    The caller owns commit and rollback. The increment is a single UPDATE so
    concurrent inserts on the same post serialize on the post row. A post
    already held by the session gets the stored counter, not a local guess.
    """
    session.add(like)
    await session.flush()

    likes_count_column = cast(Any, Post.likes_count)
    result = await session.execute(
        update(Post)
        .where(eq(Post.id, like.post_id))
        .values(likes_count=likes_count_column + 1)
        .returning(likes_count_column)
        .execution_options(synchronize_session=False)
    )
    stored_count = int(result.scalar_one())

    loaded_post = session.identity_map.get(identity_key(Post, like.post_id))
    if loaded_post is not None:
        set_committed_value(loaded_post, "likes_count", stored_count)
    return like


async def record_like(
    session: AsyncSession,
    *,
    post_id: int,
    user_id: int,
    liked_at: datetime | None = None,
) -> Like:
    """Persist one like and its counter increment as a single transaction."""
    like = Like(post_id=post_id, user_id=user_id, created_at=liked_at or utcnow())
    try:
        await add_like(session, like)
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning(
            "Rejected like insert",
            extra={"post_id": post_id, "user_id": user_id},
        )
        raise translate_integrity_error(exc, entity="Like") from exc
    return like


async def record_comment(
    session: AsyncSession,
    *,
    post_id: int,
    user_id: int,
    content: str,
    commented_at: datetime | None = None,
) -> Comment:
    comment = Comment(
        post_id=post_id,
        user_id=user_id,
        content=content,
        created_at=commented_at or utcnow(),
    )
    session.add(comment)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning(
            "Rejected comment insert",
            extra={"post_id": post_id, "user_id": user_id},
        )
        raise translate_integrity_error(exc, entity="Comment") from exc
    return comment


async def find_likes_count_drift(session: AsyncSession) -> list[LikesCountDrift]:
    """Return posts whose cached counter disagrees with their like rows."""
    post_id_column = cast(ColumnElement[int], Post.id)
    likes_count_column = cast(ColumnElement[int], Post.likes_count)
    like_id_column = cast(ColumnElement[int], Like.id)
    actual_column = cast(Any, func.count(like_id_column))

    result = await session.execute(
        select(post_id_column, likes_count_column, actual_column)
        .outerjoin(Like, eq(Like.post_id, post_id_column))
        .group_by(post_id_column, likes_count_column)
        .having(ne(likes_count_column, actual_column))
        .order_by(post_id_column)
    )
    return [
        LikesCountDrift(
            post_id=post_id,
            likes_count=int(likes_count),
            actual_likes=int(actual),
        )
        for post_id, likes_count, actual in result.all()
    ]
