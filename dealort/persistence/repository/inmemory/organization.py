"""In-memory organization and member repositories for testing."""

from typing import Any, Dict, List, Optional

from dealort.domain.model import Member, Organization, OrganizationReference
from dealort.domain.repository import MemberRepository, OrganizationRepository
from dealort.domain.value import OrganizationId, Slug, UserId


class InMemoryOrganizationRepository(OrganizationRepository):
    """In-memory implementation of OrganizationRepository for testing."""

    def __init__(self) -> None:
        self._organizations: dict[OrganizationId, Organization] = {}
        self._references: dict[OrganizationId, OrganizationReference] = {}

    def _listed(self, categories: Optional[List[str]]) -> List[Organization]:
        organizations = [o for o in self._organizations.values() if o.is_listed]
        if categories:
            organizations = [
                o for o in organizations if set(o.category) & set(categories)
            ]
        return organizations

    async def find_by_id(
        self, organization_id: OrganizationId
    ) -> Optional[Organization]:
        return self._organizations.get(organization_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Organization]:
        for organization in self._organizations.values():
            if organization.slug == slug:
                return organization
        return None

    async def find_listed(
        self, categories: Optional[List[str]] = None
    ) -> List[Organization]:
        organizations = self._listed(categories)
        organizations.sort(key=lambda o: o.created_at, reverse=True)
        return organizations

    async def find_released(
        self, categories: Optional[List[str]] = None
    ) -> List[Organization]:
        organizations = [
            o for o in self._listed(categories) if o.release_date is not None
        ]
        organizations.sort(key=lambda o: o.release_date, reverse=True)
        return organizations

    async def find_recent(self, limit: int) -> List[Organization]:
        return (await self.find_listed())[:limit]

    async def save(self, organization: Organization) -> Organization:
        self._organizations[organization.id] = organization
        return organization

    async def update_fields(
        self, organization_id: OrganizationId, values: Dict[str, Any]
    ) -> Optional[Organization]:
        organization = self._organizations.get(organization_id)
        if organization is None:
            return None
        updated = Organization.model_validate({**organization.model_dump(), **values})
        self._organizations[organization_id] = updated
        return updated

    async def set_rating(self, organization_id: OrganizationId, rating: int) -> None:
        organization = self._organizations.get(organization_id)
        if organization is not None:
            self._organizations[organization_id] = organization.model_copy(
                update={"rating": rating}
            )

    async def increment_impressions(self, organization_id: OrganizationId) -> None:
        organization = self._organizations.get(organization_id)
        if organization is not None:
            self._organizations[organization_id] = organization.model_copy(
                update={"impressions": organization.impressions + 1}
            )

    async def decrement_impressions(self, organization_id: OrganizationId) -> None:
        organization = self._organizations.get(organization_id)
        if organization is not None:
            self._organizations[organization_id] = organization.model_copy(
                update={"impressions": max(organization.impressions - 1, 0)}
            )

    async def find_reference(
        self, organization_id: OrganizationId
    ) -> Optional[OrganizationReference]:
        return self._references.get(organization_id)

    async def save_reference(
        self, reference: OrganizationReference
    ) -> OrganizationReference:
        existing = self._references.get(reference.organization_id)
        if existing is not None:
            # Keyed by organization: keep the original row identity
            reference = reference.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
        self._references[reference.organization_id] = reference
        return reference


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self) -> None:
        self._members: list[Member] = []

    async def save(self, member: Member) -> Member:
        self._members.append(member)
        return member

    async def find(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[Member]:
        for member in self._members:
            if member.organization_id == organization_id and member.user_id == user_id:
                return member
        return None

    async def find_by_organization(
        self, organization_id: OrganizationId
    ) -> List[Member]:
        members = [m for m in self._members if m.organization_id == organization_id]
        members.sort(key=lambda m: m.created_at)
        return members

    async def find_organization_ids(self, user_id: UserId) -> List[OrganizationId]:
        seen: list[OrganizationId] = []
        for member in self._members:
            if member.user_id == user_id and member.organization_id not in seen:
                seen.append(member.organization_id)
        return seen
