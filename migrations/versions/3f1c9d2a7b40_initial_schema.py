"""initial_schema

Create the Dealort schema:
- Users (written by the external auth service)
- Organizations (products), their members and reference URLs
- Follows and impressions (likes)
- Reviews (one per user and organization)
- Comments (threaded via parent_id) and comment likes
- Reports and the waitlist

Revision ID: 3f1c9d2a7b40
Revises:
Create Date: 2026-10-17 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9d2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*names: str) -> list[sa.Column]:
    return [
        sa.Column(
            name,
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        )
        for name in names
    ]


def _organization_fk() -> sa.Column:
    return sa.Column(
        "organization_id",
        sa.Text(),
        sa.ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )


def _user_fk() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Text(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("display_username", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    # ========================================================================
    # ORGANIZATIONS table
    # ========================================================================
    op.create_table(
        "organizations",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("tagline", sa.String(300), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "category",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("logo", sa.Text(), nullable=True),
        sa.Column("gallery", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("is_dev", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "is_open_source", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("is_listed", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("impressions", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("release_date", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
        sa.CheckConstraint("impressions >= 0", name="impressions_non_negative"),
    )
    op.create_index(
        "idx_organizations_created_at",
        "organizations",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_organizations_is_listed", "organizations", ["is_listed"])

    # ========================================================================
    # MEMBERS table
    # ========================================================================
    op.create_table(
        "members",
        sa.Column("id", sa.Text(), nullable=False),
        _organization_fk(),
        _user_fk(),
        sa.Column("role", sa.String(20), nullable=False, server_default="member"),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_members_organization_id", "members", ["organization_id"])
    op.create_index("idx_members_user_id", "members", ["user_id"])

    # ========================================================================
    # ORGANIZATION_REFERENCES table (one row per organization)
    # ========================================================================
    op.create_table(
        "organization_references",
        sa.Column("id", sa.Text(), nullable=False),
        _organization_fk(),
        sa.Column("web_url", sa.Text(), nullable=True),
        sa.Column("x_url", sa.Text(), nullable=True),
        sa.Column("linkedin_url", sa.Text(), nullable=True),
        sa.Column("source_code_url", sa.Text(), nullable=True),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("organization_id"),
    )

    # ========================================================================
    # FOLLOWS and ORGANIZATION_IMPRESSIONS tables
    # ========================================================================
    op.create_table(
        "follows",
        sa.Column("id", sa.Text(), nullable=False),
        _organization_fk(),
        _user_fk(),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_follows_organization_user", "follows", ["organization_id", "user_id"]
    )

    op.create_table(
        "organization_impressions",
        sa.Column("id", sa.Text(), nullable=False),
        _organization_fk(),
        _user_fk(),
        sa.Column("type", sa.String(20), nullable=False, server_default="like"),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_impressions_organization_created",
        "organization_impressions",
        ["organization_id", "created_at"],
    )
    op.create_index(
        "idx_impressions_user_type", "organization_impressions", ["user_id", "type"]
    )

    # ========================================================================
    # REVIEWS table
    # ========================================================================
    op.create_table(
        "reviews",
        sa.Column("id", sa.Text(), nullable=False),
        _organization_fk(),
        _user_fk(),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )
    op.create_index(
        "idx_reviews_organization_created",
        "reviews",
        ["organization_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_reviews_user_id", "reviews", ["user_id"])

    # ========================================================================
    # COMMENTS and COMMENT_LIKES tables
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Text(), nullable=False),
        _organization_fk(),
        _user_fk(),
        sa.Column("parent_id", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_organization_created",
        "comments",
        ["organization_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    op.create_table(
        "comment_likes",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("comment_id", sa.Text(), nullable=False),
        _user_fk(),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comment_likes_user_comment", "comment_likes", ["user_id", "comment_id"]
    )
    op.create_index("idx_comment_likes_comment_id", "comment_likes", ["comment_id"])

    # ========================================================================
    # REPORTS and WAITLIST tables
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column("id", sa.Text(), nullable=False),
        _user_fk(),
        sa.Column("reportable_type", sa.String(20), nullable=False),
        sa.Column("reportable_id", sa.Text(), nullable=False),
        sa.Column("reason", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        *_timestamps("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_reports_reportable", "reports", ["reportable_type", "reportable_id"]
    )

    op.create_table(
        "waitlist",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=False, server_default=""),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    # ========================================================================
    # TRIGGERS: keep updated_at current
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    for table in ("users", "reviews", "comments", "waitlist"):
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column();
        """)


def downgrade() -> None:
    """Downgrade schema."""
    for table in ("users", "reviews", "comments", "waitlist"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("waitlist")
    op.drop_table("reports")
    op.drop_table("comment_likes")
    op.drop_table("comments")
    op.drop_table("reviews")
    op.drop_table("organization_impressions")
    op.drop_table("follows")
    op.drop_table("organization_references")
    op.drop_table("members")
    op.drop_table("organizations")
    op.drop_table("users")
