"""Post like model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer
from sqlmodel import Field, SQLModel


class Like(SQLModel, table=True):
    """One individual like event on a post."""

    __tablename__ = "likes"
    __table_args__ = (Index("ix_likes_post_id", "post_id"),)

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
    created_at: datetime = Field(sa_column=Column(DateTime(), nullable=False))
