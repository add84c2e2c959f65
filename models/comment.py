"""Post comment model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Text
from sqlmodel import Field, SQLModel


class Comment(SQLModel, table=True):
    """One individual comment event on a post."""

    __tablename__ = "comments"
    __table_args__ = (
        CheckConstraint("length(content) > 0", name="ck_comments_content_not_empty"),
        Index("ix_comments_post_id", "post_id"),
    )

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    post_id: int = Field(
        sa_column=Column(Integer, ForeignKey("posts.id"), nullable=False)
    )
    user_id: int = Field(
        sa_column=Column(Integer, ForeignKey("users.id"), nullable=False)
    )
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(sa_column=Column(DateTime(), nullable=False))
