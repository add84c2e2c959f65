"""Read-only engagement reports over normalized activity."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, cast

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from core import settings
from models import Comment, Like, Post, User

from .common import desc, eq
from .schemas import PostEngagementRow, RankedPostRow, UserEngagementRow

# Score weights in tenths: 0.7 per like, 0.3 per comment. Integer arithmetic
# keeps equal scores equal so RANK() groups ties exactly.
LIKE_WEIGHT_TENTHS = 7
COMMENT_WEIGHT_TENTHS = 3


def _distinct_like_count() -> Any:
    return cast(Any, func.count(cast(ColumnElement[int], Like.id).distinct()))


def _distinct_comment_count() -> Any:
    return cast(Any, func.count(cast(ColumnElement[int], Comment.id).distinct()))


def tenths_to_score(tenths: int) -> Decimal:
    return Decimal(int(tenths)).scaleb(-1)


async def top_engagement(
    session: AsyncSession,
    *,
    limit: int | None = None,
) -> list[PostEngagementRow]:
    """Posts with author details ordered by likes, then comments.

    ``limit`` defaults to ``settings.top_posts_limit``.
    """
    if limit is None:
        limit = settings.top_posts_limit
    if limit <= 0:
        raise ValueError("limit must be positive")

    post_id_column = cast(ColumnElement[int], Post.id)
    total_likes = _distinct_like_count().label("total_likes")
    total_comments = _distinct_comment_count().label("total_comments")

    stmt = (
        select(
            post_id_column,
            cast(ColumnElement[str], Post.content),
            cast(ColumnElement[Any], Post.created_at),
            cast(ColumnElement[str], User.username),
            cast(ColumnElement[str], User.email),
            total_likes,
            total_comments,
        )
        .join(User, eq(Post.user_id, User.id))
        .outerjoin(Like, eq(Like.post_id, post_id_column))
        .outerjoin(Comment, eq(Comment.post_id, post_id_column))
        .group_by(post_id_column, Post.content, Post.created_at, User.username, User.email)
        .order_by(desc(total_likes), desc(total_comments), post_id_column)
        .limit(limit)
    )
    result = await session.execute(stmt)
    return [
        PostEngagementRow(
            post_id=post_id,
            post_content=content,
            post_date=created_at,
            username=username,
            email=email,
            total_likes=int(likes),
            total_comments=int(comments),
        )
        for post_id, content, created_at, username, email, likes, comments in result.all()
    ]


async def ranked_engagement(session: AsyncSession) -> list[RankedPostRow]:
    """Every post ranked by weighted engagement score with RANK() semantics."""
    post_id_column = cast(ColumnElement[int], Post.id)
    score_tenths = (
        _distinct_like_count() * LIKE_WEIGHT_TENTHS
        + _distinct_comment_count() * COMMENT_WEIGHT_TENTHS
    ).label("score_tenths")

    post_scores = (
        select(
            post_id_column.label("post_id"),
            cast(ColumnElement[str], Post.content).label("post_content"),
            cast(ColumnElement[str], User.username).label("username"),
            score_tenths,
        )
        .join(User, eq(Post.user_id, User.id))
        .outerjoin(Like, eq(Like.post_id, post_id_column))
        .outerjoin(Comment, eq(Comment.post_id, post_id_column))
        .group_by(post_id_column, Post.content, User.username)
        .cte("post_scores")
    )

    post_rank = cast(Any, func.rank()).over(order_by=desc(post_scores.c.score_tenths)).label(
        "post_rank"
    )
    stmt = select(
        post_scores.c.post_id,
        post_scores.c.post_content,
        post_scores.c.username,
        post_scores.c.score_tenths,
        post_rank,
    ).order_by(post_rank, post_scores.c.post_id)

    result = await session.execute(stmt)
    return [
        RankedPostRow(
            post_id=post_id,
            post_content=content,
            username=username,
            engagement_score=tenths_to_score(tenths),
            post_rank=int(rank),
        )
        for post_id, content, username, tenths, rank in result.all()
    ]


async def user_engagement_report(session: AsyncSession) -> list[UserEngagementRow]:
    """Every user with each of their posts; users without posts appear once."""
    post_id_column = cast(ColumnElement[int], Post.id)
    username_column = cast(ColumnElement[str], User.username)
    post_date_column = cast(ColumnElement[Any], Post.created_at)

    stmt = (
        select(
            username_column,
            post_id_column,
            cast(ColumnElement[str], Post.content),
            post_date_column,
            _distinct_like_count(),
            _distinct_comment_count(),
        )
        .select_from(User)
        .outerjoin(Post, eq(Post.user_id, User.id))
        .outerjoin(Like, eq(Like.post_id, post_id_column))
        .outerjoin(Comment, eq(Comment.post_id, post_id_column))
        .group_by(User.id, username_column, post_id_column, Post.content, post_date_column)
        .order_by(username_column, desc(post_date_column), post_id_column)
    )
    result = await session.execute(stmt)
    return [
        UserEngagementRow(
            username=username,
            post_id=post_id,
            post_content=content,
            post_date=post_date,
            total_likes=int(likes),
            total_comments=int(comments),
        )
        for username, post_id, content, post_date, likes, comments in result.all()
    ]
