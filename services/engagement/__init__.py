"""Engagement counters and reports."""

from .counters import (
    LikesCountDrift,
    add_like,
    find_likes_count_drift,
    record_comment,
    record_like,
)
from .reports import (
    COMMENT_WEIGHT_TENTHS,
    LIKE_WEIGHT_TENTHS,
    ranked_engagement,
    top_engagement,
    user_engagement_report,
)
from .schemas import PostEngagementRow, RankedPostRow, UserEngagementRow

__all__ = [
    "LikesCountDrift",
    "PostEngagementRow",
    "RankedPostRow",
    "UserEngagementRow",
    "LIKE_WEIGHT_TENTHS",
    "COMMENT_WEIGHT_TENTHS",
    "add_like",
    "record_like",
    "record_comment",
    "find_likes_count_drift",
    "top_engagement",
    "ranked_engagement",
    "user_engagement_report",
]
