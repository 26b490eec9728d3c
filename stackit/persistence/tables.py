"""SQLAlchemy table definitions for StackIt.

These tables are used with SQLAlchemy Core and match the schema defined in
the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (points ledger, stats and achievements)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("allow_anonymous", Boolean, nullable=False, server_default="true"),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("level", String(20), nullable=False, server_default="Beginner"),
    Column("questions_asked", Integer, nullable=False, server_default="0"),
    Column("answers_given", Integer, nullable=False, server_default="0"),
    Column("accepted_answers", Integer, nullable=False, server_default="0"),
    Column("answer_streak", Integer, nullable=False, server_default="0"),
    Column("last_answer_date", Date, nullable=True),
    Column("total_upvotes", Integer, nullable=False, server_default="0"),
    Column("total_downvotes", Integer, nullable=False, server_default="0"),
    Column("total_views", Integer, nullable=False, server_default="0"),
    Column(
        "confidence_booster_badge_count", Integer, nullable=False, server_default="0"
    ),
    # [{"name": "First Question", "earned_at": "..."}]
    Column("achievements", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("points >= 0", name="points_non_negative"),
)

Index("idx_users_points", users_table.c.points.desc())
Index("idx_users_questions_asked", users_table.c.questions_asked.desc())
Index("idx_users_answers_given", users_table.c.answers_given.desc())

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("category", String(20), nullable=False, server_default="general"),
    Column("tags", ARRAY(String(20)), nullable=False, server_default="{}"),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("status", String(20), nullable=False, server_default="open"),
    Column("priority", String(10), nullable=False, server_default="medium"),
    # Mirrors answers.is_accepted; kept in sync by the scoring coordinator
    Column("accepted_answer_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_activity_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_last_activity_at", questions_table.c.last_activity_at.desc())
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("accepted_by", UUID, nullable=True),
    Column("acceptance_rewarded", Boolean, nullable=False, server_default="false"),
    Column(
        "confidence_booster_awarded", Boolean, nullable=False, server_default="false"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
# At most one accepted answer per question
Index(
    "uq_answers_one_accepted",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)

# ============================================================================
# VOTES TABLE (one row per voter per item)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("votable_type", String(10), nullable=False),  # 'question', 'answer'
    Column("votable_id", UUID, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("vote_type", String(4), nullable=False),  # 'up', 'down'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("votable_type", "votable_id", "user_id", name="uq_votes_voter"),
)

Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)

# ============================================================================
# COMMENTS TABLE (flat remarks on questions and answers)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("target_type", String(10), nullable=False),  # 'question', 'answer'
    Column("target_id", UUID, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", String(1000), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_target",
    comments_table.c.target_type,
    comments_table.c.target_id,
    comments_table.c.created_at,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("sender_id", UUID, nullable=True),
    Column("type", String(30), nullable=False),
    Column("title", String(100), nullable=False),
    Column("message", String(500), nullable=False),
    Column("data", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("priority", String(10), nullable=False, server_default="medium"),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    notifications_table.c.is_read,
)
