"""Add cached likes_count column to posts."""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "20261019_0002"
down_revision: str | None = "20261019_0001"
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.add_column(
        "posts",
        sa.Column(
            "likes_count",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
        ),
    )
    # Backfill from existing like rows so the counter starts consistent.
    op.execute(
        "UPDATE posts SET likes_count = "
        "(SELECT COUNT(*) FROM likes WHERE likes.post_id = posts.id)"
    )


def downgrade() -> None:
    with op.batch_alter_table("posts") as batch_op:
        batch_op.drop_column("likes_count")
