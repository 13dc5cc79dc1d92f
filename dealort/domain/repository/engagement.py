"""Follow and impression repository interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from dealort.domain.model import Follow, OrganizationImpression
from dealort.domain.value import (
    ImpressionId,
    ImpressionType,
    OrganizationId,
    UserId,
)


class FollowRepository(ABC):
    """Repository for Follow entity."""

    @abstractmethod
    async def find(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[Follow]:
        """Find a user's follow of an organization.

        Returns:
            The follow if present, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Save a follow."""
        pass

    @abstractmethod
    async def delete(self, organization_id: OrganizationId, user_id: UserId) -> None:
        """Remove a user's follow of an organization (no-op if absent)."""
        pass

    @abstractmethod
    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        """Count followers of an organization."""
        pass


class ImpressionRepository(ABC):
    """Repository for OrganizationImpression entity."""

    @abstractmethod
    async def find(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        impression_type: ImpressionType,
    ) -> Optional[OrganizationImpression]:
        """Find a user's impression of a given type.

        Returns:
            The impression if present, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, impression: OrganizationImpression) -> OrganizationImpression:
        """Save an impression."""
        pass

    @abstractmethod
    async def delete(self, impression_id: ImpressionId) -> None:
        """Delete an impression by ID."""
        pass

    @abstractmethod
    async def count_by_organization(
        self, organization_id: OrganizationId, impression_type: ImpressionType
    ) -> int:
        """Count impressions of one type for an organization."""
        pass

    @abstractmethod
    async def count_in_window(
        self,
        organization_ids: List[OrganizationId],
        start: datetime,
        end: datetime,
    ) -> int:
        """Count impressions of any type created in ``[start, end)``.

        Args:
            organization_ids: Organizations to count across
            start: Inclusive lower bound
            end: Exclusive upper bound

        Returns:
            Number of impressions
        """
        pass
