"""Add lookup indexes used by the engagement reports."""

from collections.abc import Sequence

from alembic import op

revision: str = "20261019_0003"
down_revision: str | None = "20261019_0002"
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_index("ix_likes_post_id", "likes", ["post_id"], unique=False)
    op.create_index("ix_comments_post_id", "comments", ["post_id"], unique=False)
    op.create_index(
        "ix_posts_user_id_created_at",
        "posts",
        ["user_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_posts_user_id_created_at", table_name="posts")
    op.drop_index("ix_comments_post_id", table_name="comments")
    op.drop_index("ix_likes_post_id", table_name="likes")
