"""Post domain model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text, text
from sqlmodel import Field, SQLModel


class Post(SQLModel, table=True):
    """Authored post with a cached like counter."""

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_user_id_created_at", "user_id", "created_at"),
    )

    id: int = Field(sa_column=Column(Integer, primary_key=True, autoincrement=False))
    user_id: int = Field(
        sa_column=Column(Integer, ForeignKey("users.id"), nullable=False)
    )
    content: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    created_at: datetime = Field(sa_column=Column(DateTime(), nullable=False))
    # Maintained by services.engagement.counters; never written directly.
    likes_count: int = Field(
        default=0,
        sa_column=Column(
            Integer,
            nullable=False,
            default=0,
            server_default=text("0"),
        ),
    )
