"""SQLAlchemy table definitions for Paracosm.

These are SQLAlchemy Core tables mapped by hand in ``mappers``.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# WORLDS TABLE
# ============================================================================
worlds_table = Table(
    "worlds",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column(
        "creator_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "forked_from_id",
        UUID,
        ForeignKey("worlds.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_worlds_creator_id", worlds_table.c.creator_id)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "world_id", UUID, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_world_id", questions_table.c.world_id)

# ============================================================================
# COMMUNITY POSTS TABLE
# ============================================================================
community_posts_table = Table(
    "community_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "world_id", UUID, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_community_posts_world_id", community_posts_table.c.world_id)

# ============================================================================
# COMMUNITY COMMENTS TABLE
# ============================================================================
community_comments_table = Table(
    "community_comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id",
        UUID,
        ForeignKey("community_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(50), nullable=False),  # Denormalized from users
    Column("comment_text", Text, nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("community_comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_community_comments_post_id", community_comments_table.c.post_id)
Index(
    "idx_community_comments_parent_id", community_comments_table.c.parent_comment_id
)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "target_type",
        Enum(
            "question",
            "community_post",
            "community_comment",
            name="vote_target_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_vote"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
