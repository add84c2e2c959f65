"""Flat activity records as found in the raw social-media export."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

CSV_COLUMNS = (
    "user_id",
    "username",
    "email",
    "post_id",
    "post_content",
    "post_date",
    "likes",
    "comments",
)


class RawActivityRecord(BaseModel):
    """One un-normalized row: a post with its author and aggregate counts."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    user_id: int = Field(gt=0)
    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=100)
    post_id: int = Field(gt=0)
    content: str | None = Field(
        default=None,
        validation_alias=AliasChoices("content", "post_content"),
    )
    post_date: datetime
    like_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("like_count", "likes"),
    )
    comment_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("comment_count", "comments"),
    )

    @field_validator("post_date", mode="before")
    @classmethod
    def _parse_post_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = datetime.fromisoformat(value.strip())
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


def read_activity_csv(path: Path | str) -> list[RawActivityRecord]:
    """Load and validate a CSV export with the raw dataset's column names."""
    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    columns = {column.strip().lower(): column for column in frame.columns}
    missing = [column for column in CSV_COLUMNS if column not in columns]
    if missing:
        raise ValueError(
            f"CSV is missing required columns: {missing}. Found: {list(frame.columns)}"
        )
    frame = frame.rename(columns={original: name for name, original in columns.items()})

    records: list[RawActivityRecord] = []
    # Line 1 holds the header row.
    for line_number, row in enumerate(frame.to_dict("records"), start=2):
        payload = {name: row[name] for name in CSV_COLUMNS}
        if payload["post_content"] == "":
            payload["post_content"] = None
        try:
            records.append(RawActivityRecord.model_validate(payload))
        except ValidationError as exc:
            raise ValueError(f"Invalid activity record on line {line_number}: {exc}") from exc
    return records


def _sample(
    user_id: int,
    username: str,
    email: str,
    post_id: int,
    content: str,
    post_date: str,
    likes: int,
    comments: int,
) -> RawActivityRecord:
    return RawActivityRecord.model_validate(
        {
            "user_id": user_id,
            "username": username,
            "email": email,
            "post_id": post_id,
            "post_content": content,
            "post_date": post_date,
            "likes": likes,
            "comments": comments,
        }
    )


SAMPLE_RECORDS: tuple[RawActivityRecord, ...] = (
    _sample(1, "johndoe", "john@example.com", 101, "Just a test post.", "2023-01-15 10:30:00", 5, 3),
    _sample(2, "marysmith", "mary.smith@mail.co", 102, "My first post here!", "2023-01-15 11:00:00", 12, 5),
    _sample(3, "ali_g", "alig@email.net", 103, "Feeling great today!", "2023-01-15 12:00:00", 9, 2),
    _sample(4, "sarah_p", "sarahp@gmail.com", 104, "Lunch time!", "2023-01-15 13:00:00", 15, 7),
    _sample(5, "chrisW", "chris.w@yahoo.com", 105, "Hello world!", "2023-01-15 14:00:00", 10, 4),
    _sample(6, "emily_jones", "emily.j@web.de", 106, "Coding all night.", "2023-01-15 15:00:00", 7, 1),
    _sample(7, "alex123", "alex@example.net", 107, "New profile pic!", "2023-01-15 16:00:00", 18, 6),
    _sample(8, "brian_k", "briank@mail.com", 108, "Loving this weather.", "2023-01-15 17:00:00", 22, 11),
    _sample(9, "linda_b", "linda@b.net", 109, "What a day...", "2023-01-15 18:00:00", 6, 3),
    _sample(10, "steve_x", "stevex@example.org", 110, "Thoughts?", "2023-01-15 19:00:00", 14, 5),
)
