"""Organization repository interfaces."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from dealort.domain.model import Member, Organization, OrganizationReference
from dealort.domain.value import OrganizationId, Slug, UserId


class OrganizationRepository(ABC):
    """Repository for the Organization aggregate and its reference links."""

    @abstractmethod
    async def find_by_id(
        self, organization_id: OrganizationId
    ) -> Optional[Organization]:
        """Find an organization by ID.

        Args:
            organization_id: The organization's unique identifier

        Returns:
            The organization if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Organization]:
        """Find an organization by its slug.

        Args:
            slug: URL slug

        Returns:
            The organization if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_listed(
        self, categories: Optional[List[str]] = None
    ) -> List[Organization]:
        """Find listed organizations, newest first.

        Args:
            categories: If given, keep organizations sharing at least one
                category with this list

        Returns:
            Listed organizations ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_released(
        self, categories: Optional[List[str]] = None
    ) -> List[Organization]:
        """Find listed organizations that have a release date set.

        Args:
            categories: Optional any-match category filter

        Returns:
            Organizations with a release date, newest release first
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int) -> List[Organization]:
        """Find the most recently created listed organizations.

        Args:
            limit: Maximum number of organizations to return

        Returns:
            Listed organizations ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update).

        Args:
            organization: The organization to save

        Returns:
            The saved organization
        """
        pass

    @abstractmethod
    async def update_fields(
        self, organization_id: OrganizationId, values: Dict[str, Any]
    ) -> Optional[Organization]:
        """Overwrite the given columns of an organization.

        Only keys present in ``values`` are written; ``None`` clears a column.

        Args:
            organization_id: The organization's ID
            values: Column name to new value

        Returns:
            The updated organization, None if it does not exist
        """
        pass

    @abstractmethod
    async def set_rating(self, organization_id: OrganizationId, rating: int) -> None:
        """Store the recomputed rating.

        Args:
            organization_id: The organization's ID
            rating: Rounded average rating (0 when unreviewed)
        """
        pass

    @abstractmethod
    async def increment_impressions(self, organization_id: OrganizationId) -> None:
        """Atomically add one to the impressions counter.

        Uses a single SQL-level increment to avoid lost updates.
        """
        pass

    @abstractmethod
    async def decrement_impressions(self, organization_id: OrganizationId) -> None:
        """Atomically subtract one from the impressions counter (minimum 0)."""
        pass

    @abstractmethod
    async def find_reference(
        self, organization_id: OrganizationId
    ) -> Optional[OrganizationReference]:
        """Find the reference links of an organization.

        Returns:
            The reference row if present, None otherwise
        """
        pass

    @abstractmethod
    async def save_reference(
        self, reference: OrganizationReference
    ) -> OrganizationReference:
        """Insert or update the reference row, keyed by organization.

        Args:
            reference: Reference links

        Returns:
            The stored reference
        """
        pass


class MemberRepository(ABC):
    """Repository for organization memberships."""

    @abstractmethod
    async def save(self, member: Member) -> Member:
        """Save a membership."""
        pass

    @abstractmethod
    async def find(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[Member]:
        """Find a user's membership in an organization.

        Returns:
            The membership if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_organization(
        self, organization_id: OrganizationId
    ) -> List[Member]:
        """Find all members of an organization, oldest membership first."""
        pass

    @abstractmethod
    async def find_organization_ids(self, user_id: UserId) -> List[OrganizationId]:
        """Find the IDs of every organization the user belongs to."""
        pass
