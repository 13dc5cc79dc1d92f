"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from dealort.domain.model import Member, Organization, User
from dealort.domain.model.common import utcnow
from dealort.domain.repository import (
    MemberRepository,
    OrganizationRepository,
    UserRepository,
)
from dealort.domain.value import (
    MemberId,
    MemberRole,
    OrganizationId,
    Slug,
    UserId,
    new_id,
)


def make_user(name: str = "Alice", user_id: str | None = None) -> User:
    """Build a user with a unique ID and an email derived from the name."""
    uid = user_id or new_id()
    return User(
        id=UserId(uid),
        name=name,
        username=name.lower(),
        display_username=name,
        email=f"{name.lower()}-{uid[:8]}@example.com",
    )


def make_organization(
    slug: str = "acme",
    created_at: datetime | None = None,
    **overrides,
) -> Organization:
    """Build a listed organization.

    Args:
        slug: Slug (also used to derive the display name)
        created_at: Creation time (defaults to now)
        **overrides: Any other Organization field
    """
    return Organization(
        id=OrganizationId(new_id()),
        name=slug.replace("-", " ").title(),
        slug=Slug(slug),
        created_at=created_at or utcnow(),
        **overrides,
    )


def minutes_ago(minutes: int) -> datetime:
    return utcnow() - timedelta(minutes=minutes)


async def seed_user(container, name: str = "Alice") -> User:
    """Save a user through the container's user repository."""
    user_repo = await container.get(UserRepository)
    return await user_repo.save(make_user(name))


async def seed_organization(
    container, owner_id: UserId | None = None, slug: str = "acme", **overrides
) -> Organization:
    """Save an organization, and its owner membership when an owner is given."""
    org_repo = await container.get(OrganizationRepository)
    organization = await org_repo.save(make_organization(slug, **overrides))
    if owner_id is not None:
        member_repo = await container.get(MemberRepository)
        await member_repo.save(
            Member(
                id=MemberId(new_id()),
                organization_id=organization.id,
                user_id=owner_id,
                role=MemberRole.OWNER,
            )
        )
    return organization
