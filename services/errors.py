"""Domain errors raised by the engagement store."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from db.errors import (
    is_foreign_key_violation,
    is_required_value_violation,
    is_unique_violation,
)


class EngagementStoreError(Exception):
    """Base class for errors surfaced to store callers."""


class ConflictError(EngagementStoreError):
    """A unique username or email is already held by another identity."""


class ReferentialIntegrityError(EngagementStoreError):
    """A row references a user or post that does not exist."""


class RequiredFieldError(EngagementStoreError):
    """A required value was missing or empty."""


def translate_integrity_error(error: IntegrityError, *, entity: str) -> EngagementStoreError:
    """Map a driver integrity failure onto the store's error hierarchy.

    Unclassified failures fall back to the base error so callers always see a
    store error, with the original exception chained by the caller.
    """
    if is_unique_violation(error):
        return ConflictError(f"{entity} conflicts with an existing record")
    if is_foreign_key_violation(error):
        return ReferentialIntegrityError(f"{entity} references a missing user or post")
    if is_required_value_violation(error):
        return RequiredFieldError(f"{entity} is missing a required value")
    return EngagementStoreError(f"{entity} violates a database constraint")


__all__ = [
    "EngagementStoreError",
    "ConflictError",
    "ReferentialIntegrityError",
    "RequiredFieldError",
    "translate_integrity_error",
]
