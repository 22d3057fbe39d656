"""initial_schema

Create the schema for Quill:
- Users and articles (the subset comments depend on)
- Comments (threaded, unlimited depth, root_id stored on every row)
- Comment likes (one per user and comment)
- Decorations and user decorations

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.512301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_status AS ENUM ('PUBLISHED', 'DRAFT', 'DELETED', 'REJECTED');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE decoration_type AS ENUM ('AVATAR_FRAME', 'BADGE', 'COMMENT_BUBBLE', 'NAMEPLATE');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE decoration_rarity AS ENUM ('COMMON', 'RARE', 'EPIC', 'LEGENDARY');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # Comment ids are reserved with nextval() before the INSERT
    op.execute("CREATE SEQUENCE IF NOT EXISTS comments_id_seq")
    op.execute("CREATE SEQUENCE IF NOT EXISTS comment_likes_id_seq")

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("nickname", sa.String(length=100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    # ========================================================================
    # ARTICLES table
    # ========================================================================
    op.create_table(
        "articles",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("author_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "comment_count", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_articles_author_id", "articles", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('comments_id_seq')"),
            nullable=False,
        ),
        sa.Column("article_id", sa.BigInteger(), nullable=False),
        sa.Column("author_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_id", sa.BigInteger(), nullable=True),
        sa.Column("root_id", sa.BigInteger(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(name="comment_status", create_type=False),
            server_default="PUBLISHED",
            nullable=False,
        ),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("reply_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
        sa.CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
        sa.CheckConstraint(
            "parent_id IS NOT NULL OR root_id = id", name="top_level_is_own_root"
        ),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("ALTER SEQUENCE comments_id_seq OWNED BY comments.id")

    # Thread reads: WHERE root_id = ? ORDER BY created_at, id
    op.create_index(
        "idx_comments_root_id_created_at",
        "comments",
        ["root_id", "created_at", "id"],
    )
    # Reply pages and previews: WHERE parent_id = ? ORDER BY created_at, id
    op.create_index(
        "idx_comments_parent_id_created_at",
        "comments",
        ["parent_id", "created_at", "id"],
    )
    op.create_index(
        "idx_comments_article_id_created_at",
        "comments",
        ["article_id", "created_at"],
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # COMMENT_LIKES table
    # ========================================================================
    op.create_table(
        "comment_likes",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('comment_likes_id_seq')"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
    )
    op.execute("ALTER SEQUENCE comment_likes_id_seq OWNED BY comment_likes.id")
    op.create_index("idx_comment_likes_user_id", "comment_likes", ["user_id"])

    # ========================================================================
    # DECORATIONS tables
    # ========================================================================
    op.create_table(
        "decorations",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(name="decoration_type", create_type=False),
            nullable=False,
        ),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column(
            "rarity",
            postgresql.ENUM(name="decoration_rarity", create_type=False),
            server_default="COMMON",
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "user_decorations",
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("decoration_id", sa.BigInteger(), nullable=False),
        sa.Column("is_using", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("is_permanent", sa.Boolean(), server_default="true", nullable=False),
        sa.Column("expires_at", postgresql.TIMESTAMP(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["decoration_id"], ["decorations.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint("user_id", "decoration_id", name="uq_user_decoration"),
    )
    op.create_index(
        "idx_user_decorations_in_use",
        "user_decorations",
        ["user_id"],
        postgresql_where=sa.text("is_using"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("user_decorations")
    op.drop_table("decorations")
    op.drop_table("comment_likes")
    op.drop_table("comments")
    op.drop_table("articles")
    op.drop_table("users")

    op.execute("DROP SEQUENCE IF EXISTS comment_likes_id_seq")
    op.execute("DROP SEQUENCE IF EXISTS comments_id_seq")

    op.execute("DROP TYPE IF EXISTS decoration_rarity")
    op.execute("DROP TYPE IF EXISTS decoration_type")
    op.execute("DROP TYPE IF EXISTS comment_status")
