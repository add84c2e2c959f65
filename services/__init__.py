"""Business logic services."""

from .engagement import (
    find_likes_count_drift,
    ranked_engagement,
    record_comment,
    record_like,
    top_engagement,
    user_engagement_report,
)
from .errors import (
    ConflictError,
    EngagementStoreError,
    ReferentialIntegrityError,
    RequiredFieldError,
)
from .ingest import RawActivityRecord, load_raw_records, read_activity_csv

__all__ = [
    "EngagementStoreError",
    "ConflictError",
    "ReferentialIntegrityError",
    "RequiredFieldError",
    "RawActivityRecord",
    "load_raw_records",
    "read_activity_csv",
    "record_like",
    "record_comment",
    "find_likes_count_drift",
    "top_engagement",
    "ranked_engagement",
    "user_engagement_report",
]
