"""User domain model."""

from __future__ import annotations

from sqlalchemy import Column, Integer, String
from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Distinct author identity taken from the flat activity dataset."""

    __tablename__ = "users"

    id: int = Field(sa_column=Column(Integer, primary_key=True, autoincrement=False))
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True)
    )
    email: str = Field(
        sa_column=Column(String(100), unique=True, nullable=False, index=True)
    )
