"""Database error helpers."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"
CHECK_VIOLATION = "23514"


def _sqlstate(error: IntegrityError) -> str | None:
    original = getattr(error, "orig", None)
    return getattr(original, "sqlstate", None) or getattr(original, "pgcode", None)


def _message(error: IntegrityError) -> str:
    return str(getattr(error, "orig", None) or error).lower()


def is_unique_violation(error: IntegrityError) -> bool:
    """Return True when the IntegrityError indicates a unique-constraint conflict."""
    if _sqlstate(error) == UNIQUE_VIOLATION:
        return True
    message = _message(error)
    return "duplicate key" in message or "unique constraint" in message


def is_foreign_key_violation(error: IntegrityError) -> bool:
    """Return True when the IntegrityError indicates a missing referenced row."""
    if _sqlstate(error) == FOREIGN_KEY_VIOLATION:
        return True
    return "foreign key constraint" in _message(error)


def is_required_value_violation(error: IntegrityError) -> bool:
    """Return True for NOT NULL and CHECK constraint failures."""
    if _sqlstate(error) in {NOT_NULL_VIOLATION, CHECK_VIOLATION}:
        return True
    message = _message(error)
    return (
        "not null constraint" in message
        or "not-null constraint" in message
        or "check constraint" in message
    )


__all__ = [
    "is_foreign_key_violation",
    "is_required_value_violation",
    "is_unique_violation",
]
