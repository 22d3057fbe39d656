"""SQLAlchemy table definitions for Quill.

These tables are used through SQLAlchemy Core; rows are mapped to the
immutable domain models in ``quill.persistence.mappers``. They match the
schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# Identifiers are reserved before insert (root_id of a top-level comment
# is its own id, written in the same INSERT)
comments_id_seq = Sequence("comments_id_seq", metadata=metadata)
comment_likes_id_seq = Sequence("comment_likes_id_seq", metadata=metadata)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("nickname", String(100), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", BigInteger, primary_key=True),
    Column("title", String(300), nullable=False),
    Column(
        "author_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

Index("idx_articles_author_id", articles_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, comments_id_seq, primary_key=True),
    Column(
        "article_id",
        BigInteger,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    # Replies go with their parent on hard delete
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("root_id", BigInteger, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "PUBLISHED",
            "DRAFT",
            "DELETED",
            "REJECTED",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="PUBLISHED",
    ),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
    CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
    CheckConstraint(
        "parent_id IS NOT NULL OR root_id = id", name="top_level_is_own_root"
    ),
)

Index(
    "idx_comments_root_id_created_at",
    comments_table.c.root_id,
    comments_table.c.created_at,
    comments_table.c.id,
)
Index(
    "idx_comments_parent_id_created_at",
    comments_table.c.parent_id,
    comments_table.c.created_at,
    comments_table.c.id,
)
Index(
    "idx_comments_article_id_created_at",
    comments_table.c.article_id,
    comments_table.c.created_at,
)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# COMMENT_LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", BigInteger, comment_likes_id_seq, primary_key=True),
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
)

Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)

# ============================================================================
# DECORATIONS TABLE
# ============================================================================
decorations_table = Table(
    "decorations",
    metadata,
    Column("id", BigInteger, primary_key=True),
    Column("name", String(100), nullable=False),
    Column(
        "type",
        postgresql.ENUM(
            "AVATAR_FRAME",
            "BADGE",
            "COMMENT_BUBBLE",
            "NAMEPLATE",
            name="decoration_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("image_url", Text, nullable=False),
    Column(
        "rarity",
        postgresql.ENUM(
            "COMMON",
            "RARE",
            "EPIC",
            "LEGENDARY",
            name="decoration_rarity",
            create_type=False,
        ),
        nullable=False,
        server_default="COMMON",
    ),
)

# ============================================================================
# USER_DECORATIONS TABLE
# ============================================================================
user_decorations_table = Table(
    "user_decorations",
    metadata,
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "decoration_id",
        BigInteger,
        ForeignKey("decorations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_using", Boolean, nullable=False, server_default="false"),
    Column("is_permanent", Boolean, nullable=False, server_default="true"),
    Column("expires_at", TIMESTAMP, nullable=True),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    UniqueConstraint("user_id", "decoration_id", name="uq_user_decoration"),
)

Index(
    "idx_user_decorations_in_use",
    user_decorations_table.c.user_id,
    postgresql_where=user_decorations_table.c.is_using,
)
