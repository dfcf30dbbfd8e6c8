"""initial_schema

Create the discussion core schema for Paracosm:
- Users (profiles referenced by comments and votes)
- Worlds (creator governs every discussion inside the world)
- Questions and community posts (votable, denormalized upvotes score)
- Community comments (threaded through parent_comment_id, votable)
- Votes (one row per voter and target, upvote or downvote)

Revision ID: 3c9d2e41a7b0
Revises:
Create Date: 2026-10-18 10:12:44.208311

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c9d2e41a7b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_target_type AS ENUM
                ('question', 'community_post', 'community_comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_type AS ENUM ('upvote', 'downvote');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # WORLDS table
    # ========================================================================
    op.create_table(
        "worlds",
        _id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column("forked_from_id", sa.UUID(), nullable=True),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["forked_from_id"], ["worlds.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_worlds_creator_id", "worlds", ["creator_id"])

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        _id_column(),
        sa.Column("world_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["world_id"], ["worlds.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_questions_world_id", "questions", ["world_id"])

    # ========================================================================
    # COMMUNITY_POSTS table
    # ========================================================================
    op.create_table(
        "community_posts",
        _id_column(),
        sa.Column("world_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["world_id"], ["worlds.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_community_posts_world_id", "community_posts", ["world_id"]
    )

    # ========================================================================
    # COMMUNITY_COMMENTS table (flat rows, threaded on read)
    # ========================================================================
    op.create_table(
        "community_comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(50), nullable=False),
        sa.Column("comment_text", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(
            ["post_id"], ["community_posts.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        # Deleting a comment removes its whole reply subtree
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["community_comments.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint(
            "length(btrim(comment_text)) > 0", name="comment_text_not_blank"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_community_comments_post_id", "community_comments", ["post_id"]
    )
    op.create_index(
        "idx_community_comments_parent_id",
        "community_comments",
        ["parent_comment_id"],
    )

    # ========================================================================
    # VOTES table (polymorphic target, no FK on target_id)
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "target_type",
            postgresql.ENUM(
                "question",
                "community_post",
                "community_comment",
                name="vote_target_type",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM("upvote", "downvote", name="vote_type", create_type=False),
            nullable=False,
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "target_type", "target_id", name="unique_vote"),
    )
    op.create_index("idx_votes_target", "votes", ["target_type", "target_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("community_comments")
    op.drop_table("community_posts")
    op.drop_table("questions")
    op.drop_table("worlds")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS vote_type")
    op.execute("DROP TYPE IF EXISTS vote_target_type")
