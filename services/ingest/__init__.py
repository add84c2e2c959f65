"""Raw dataset ingestion."""

from .expansion import (
    COMMENT_CONTENT_TEMPLATE,
    CommentExpansion,
    LikeExpansion,
    SyntheticComment,
    SyntheticLike,
    expand_comments,
    expand_likes,
)
from .loader import LoadSummary, insert_synthetic_events, load_raw_records
from .records import CSV_COLUMNS, SAMPLE_RECORDS, RawActivityRecord, read_activity_csv
from .staging import StagedDataset, StagedUser, stage_records

__all__ = [
    "COMMENT_CONTENT_TEMPLATE",
    "CSV_COLUMNS",
    "SAMPLE_RECORDS",
    "CommentExpansion",
    "LikeExpansion",
    "LoadSummary",
    "RawActivityRecord",
    "StagedDataset",
    "StagedUser",
    "SyntheticComment",
    "SyntheticLike",
    "expand_comments",
    "expand_likes",
    "insert_synthetic_events",
    "load_raw_records",
    "read_activity_csv",
    "stage_records",
]
