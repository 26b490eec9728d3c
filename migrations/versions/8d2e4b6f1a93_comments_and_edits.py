"""comments_and_edits

- Comments on questions and answers
- edited_at on questions and answers
- Indexes for the question listing (activity sort, tag filter)

Revision ID: 8d2e4b6f1a93
Revises: 3c1f9e2a7b40
Create Date: 2025-03-18 16:40:05.772310

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8d2e4b6f1a93"
down_revision: Union[str, Sequence[str], None] = "3c1f9e2a7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "questions",
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )
    op.add_column(
        "answers",
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index(
        "idx_questions_last_activity_at",
        "questions",
        [sa.text("last_activity_at DESC")],
    )
    op.create_index(
        "idx_questions_tags", "questions", ["tags"], postgresql_using="gin"
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("target_type", sa.String(10), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_target",
        "comments",
        ["target_type", "target_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comments")
    op.drop_index("idx_questions_tags", table_name="questions")
    op.drop_index("idx_questions_last_activity_at", table_name="questions")
    op.drop_column("answers", "edited_at")
    op.drop_column("questions", "edited_at")
