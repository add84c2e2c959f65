"""Shared SQLAlchemy helpers for engagement services."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, cast

from sqlalchemy.sql import ColumnElement


def eq(column: Any, value: Any) -> ColumnElement[bool]:
    """Typed equality expression helper."""
    return cast(ColumnElement[bool], column == value)


def ne(column: Any, value: Any) -> ColumnElement[bool]:
    """Typed inequality expression helper."""
    return cast(ColumnElement[bool], column != value)


def desc(column: Any) -> Any:
    """Typed descending ordering helper."""
    return cast(Any, column).desc()


def utcnow() -> datetime:
    """Naive UTC timestamp matching the schema's TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
