"""SQLAlchemy table definitions for Dealort.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (written by the auth service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("username", String(255), nullable=True, unique=True),
    Column("display_username", String(255), nullable=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("image", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ORGANIZATIONS TABLE
# ============================================================================
organizations_table = Table(
    "organizations",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("tagline", String(300), nullable=True),
    Column("description", Text, nullable=True),
    Column("category", ARRAY(Text), nullable=False, server_default="{}"),
    Column("logo", Text, nullable=True),
    Column("gallery", ARRAY(Text), nullable=True),
    Column("is_dev", Boolean, nullable=False, server_default="false"),
    Column("is_open_source", Boolean, nullable=False, server_default="false"),
    Column("is_listed", Boolean, nullable=False, server_default="true"),
    Column("rating", Integer, nullable=False, server_default="0"),
    Column("impressions", Integer, nullable=False, server_default="0"),
    Column("release_date", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("impressions >= 0", name="impressions_non_negative"),
)

Index("idx_organizations_created_at", organizations_table.c.created_at.desc())
Index("idx_organizations_is_listed", organizations_table.c.is_listed)

# ============================================================================
# MEMBERS TABLE
# ============================================================================
members_table = Table(
    "members",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "organization_id",
        Text,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(20), nullable=False, server_default="member"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_members_organization_id", members_table.c.organization_id)
Index("idx_members_user_id", members_table.c.user_id)

# ============================================================================
# ORGANIZATION REFERENCES TABLE (one row per organization)
# ============================================================================
organization_references_table = Table(
    "organization_references",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "organization_id",
        Text,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("web_url", Text, nullable=True),
    Column("x_url", Text, nullable=True),
    Column("linkedin_url", Text, nullable=True),
    Column("source_code_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "organization_id",
        Text,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_follows_organization_user", follows_table.c.organization_id, follows_table.c.user_id)

# ============================================================================
# ORGANIZATION IMPRESSIONS TABLE
# ============================================================================
organization_impressions_table = Table(
    "organization_impressions",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "organization_id",
        Text,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("type", String(20), nullable=False, server_default="like"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_impressions_organization_created",
    organization_impressions_table.c.organization_id,
    organization_impressions_table.c.created_at,
)
Index(
    "idx_impressions_user_type",
    organization_impressions_table.c.user_id,
    organization_impressions_table.c.type,
)

# ============================================================================
# REVIEWS TABLE
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "organization_id",
        Text,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("rating", Integer, nullable=False),
    Column("title", String(200), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
)

Index(
    "idx_reviews_organization_created",
    reviews_table.c.organization_id,
    reviews_table.c.created_at.desc(),
)
Index("idx_reviews_user_id", reviews_table.c.user_id)

# ============================================================================
# COMMENTS TABLE (self-referencing tree via parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "organization_id",
        Text,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("parent_id", Text, nullable=True),  # No FK: replies are deleted explicitly
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_organization_created",
    comments_table.c.organization_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", Text, primary_key=True),
    Column("comment_id", Text, nullable=False),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Deliberately not unique
Index(
    "idx_comment_likes_user_comment",
    comment_likes_table.c.user_id,
    comment_likes_table.c.comment_id,
)
Index("idx_comment_likes_comment_id", comment_likes_table.c.comment_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", Text, primary_key=True),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("reportable_type", String(20), nullable=False),  # 'comment', 'review'
    Column("reportable_id", Text, nullable=False),
    Column("reason", String(500), nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_reports_reportable",
    reports_table.c.reportable_type,
    reports_table.c.reportable_id,
)

# ============================================================================
# WAITLIST TABLE
# ============================================================================
waitlist_table = Table(
    "waitlist",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("ip_address", String(64), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
