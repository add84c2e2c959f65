"""Engagement report row schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class PostEngagementRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post_id: int
    post_content: str | None
    post_date: datetime
    username: str
    email: str
    total_likes: int
    total_comments: int


class RankedPostRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post_id: int
    post_content: str | None
    username: str
    engagement_score: Decimal
    post_rank: int


class UserEngagementRow(BaseModel):
    """One user/post pair; post fields are null for users without posts."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    post_id: int | None
    post_content: str | None
    post_date: datetime | None
    total_likes: int
    total_comments: int
