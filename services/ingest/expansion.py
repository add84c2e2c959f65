"""Expansion of aggregate counts into individual synthetic events."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

COMMENT_CONTENT_TEMPLATE = "This is comment {index}"
EVENT_SPACING = timedelta(seconds=1)


@dataclass(frozen=True, slots=True)
class SyntheticLike:
    post_id: int
    user_id: int
    created_at: datetime


@dataclass(frozen=True, slots=True)
class SyntheticComment:
    post_id: int
    user_id: int
    content: str
    created_at: datetime


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must be non-negative")


@dataclass(frozen=True, slots=True)
class LikeExpansion:
    """Restartable sequence of ``count`` likes spaced one second after ``base``."""

    post_id: int
    user_id: int
    count: int
    base: datetime

    def __post_init__(self) -> None:
        _check_count(self.count)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[SyntheticLike]:
        for index in range(1, self.count + 1):
            yield SyntheticLike(
                post_id=self.post_id,
                user_id=self.user_id,
                created_at=self.base + EVENT_SPACING * index,
            )


@dataclass(frozen=True, slots=True)
class CommentExpansion:
    """Restartable sequence of ``count`` placeholder comments after ``base``."""

    post_id: int
    user_id: int
    count: int
    base: datetime

    def __post_init__(self) -> None:
        _check_count(self.count)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[SyntheticComment]:
        for index in range(1, self.count + 1):
            yield SyntheticComment(
                post_id=self.post_id,
                user_id=self.user_id,
                content=COMMENT_CONTENT_TEMPLATE.format(index=index),
                created_at=self.base + EVENT_SPACING * index,
            )


def expand_likes(post_id: int, user_id: int, count: int, base: datetime) -> LikeExpansion:
    return LikeExpansion(post_id=post_id, user_id=user_id, count=count, base=base)


def expand_comments(
    post_id: int,
    user_id: int,
    count: int,
    base: datetime,
) -> CommentExpansion:
    return CommentExpansion(post_id=post_id, user_id=user_id, count=count, base=base)
