"""SQLAlchemy table definitions for Shiki∞Link.

Tables are mapped to domain models by hand (see mappers.py). For a fresh database
``scripts/create_schema.py`` creates them.
"""

from sqlalchemy import (
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
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("excerpt", Text, nullable=False, server_default=""),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("category_tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("status IN ('draft', 'published')", name="article_status"),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)

Index(
    "idx_articles_status_published_at",
    articles_table.c.status,
    articles_table.c.published_at,
)
Index(
    "idx_articles_category_tags",
    articles_table.c.category_tags,
    postgresql_using="gin",
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # No FK: deleting a comment leaves its replies in place as roots
    Column("parent_id", UUID, nullable=True),
    Column("author_name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected')", name="comment_status"
    ),
)

Index(
    "idx_comments_article_status",
    comments_table.c.article_id,
    comments_table.c.status,
)
Index(
    "idx_comments_status_created_at",
    comments_table.c.status,
    comments_table.c.created_at,
)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("visitor_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("article_id", "visitor_id", name="unique_like"),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(50), nullable=False),
    Column("slug", String(50), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
    Column("color", String(7), nullable=False, server_default="#3b82f6"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# MEMBERS TABLE
# ============================================================================
members_table = Table(
    "members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(100), nullable=False),
    Column("nickname", String(100), nullable=False, server_default=""),
    Column("age", Integer, nullable=True),
    Column("birthday", Date, nullable=True),
    Column("position", String(100), nullable=False, server_default=""),
    Column("personality", Text, nullable=False, server_default=""),
    Column("hobbies", Text, nullable=False, server_default=""),
    Column("image_color", String(7), nullable=False, server_default="#3b82f6"),
    Column("catchphrase", Text, nullable=False, server_default=""),
    Column("profile_image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_members_created_at", members_table.c.created_at)
