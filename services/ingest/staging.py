"""In-memory staging of raw records before they are normalized."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .records import RawActivityRecord


@dataclass(frozen=True, slots=True)
class StagedUser:
    id: int
    username: str
    email: str


@dataclass(slots=True)
class StagedDataset:
    """Distinct users and posts plus the rows whose counts get expanded.

    ``rows`` holds, per post id, the first record that introduced that post.
    """

    users: list[StagedUser] = field(default_factory=list)
    rows: list[RawActivityRecord] = field(default_factory=list)
    duplicate_user_rows: int = 0
    duplicate_post_rows: int = 0


def stage_records(records: Iterable[RawActivityRecord]) -> StagedDataset:
    staged = StagedDataset()
    seen_user_ids: set[int] = set()
    seen_post_ids: set[int] = set()

    for record in records:
        if record.user_id in seen_user_ids:
            staged.duplicate_user_rows += 1
        else:
            seen_user_ids.add(record.user_id)
            staged.users.append(
                StagedUser(id=record.user_id, username=record.username, email=record.email)
            )

        if record.post_id in seen_post_ids:
            staged.duplicate_post_rows += 1
            continue
        seen_post_ids.add(record.post_id)
        staged.rows.append(record)

    return staged
