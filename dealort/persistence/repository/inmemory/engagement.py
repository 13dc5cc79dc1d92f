"""In-memory follow and impression repositories for testing."""

from datetime import datetime
from typing import List, Optional

from dealort.domain.model import Follow, OrganizationImpression
from dealort.domain.repository import FollowRepository, ImpressionRepository
from dealort.domain.value import ImpressionId, ImpressionType, OrganizationId, UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: list[Follow] = []

    async def find(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[Follow]:
        for follow in self._follows:
            if follow.organization_id == organization_id and follow.user_id == user_id:
                return follow
        return None

    async def save(self, follow: Follow) -> Follow:
        self._follows.append(follow)
        return follow

    async def delete(self, organization_id: OrganizationId, user_id: UserId) -> None:
        self._follows = [
            f
            for f in self._follows
            if not (f.organization_id == organization_id and f.user_id == user_id)
        ]

    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        return sum(1 for f in self._follows if f.organization_id == organization_id)


class InMemoryImpressionRepository(ImpressionRepository):
    """In-memory implementation of ImpressionRepository for testing."""

    def __init__(self) -> None:
        self._impressions: dict[ImpressionId, OrganizationImpression] = {}

    async def find(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        impression_type: ImpressionType,
    ) -> Optional[OrganizationImpression]:
        for impression in self._impressions.values():
            if (
                impression.organization_id == organization_id
                and impression.user_id == user_id
                and impression.type == impression_type
            ):
                return impression
        return None

    async def save(self, impression: OrganizationImpression) -> OrganizationImpression:
        self._impressions[impression.id] = impression
        return impression

    async def delete(self, impression_id: ImpressionId) -> None:
        self._impressions.pop(impression_id, None)

    async def count_by_organization(
        self, organization_id: OrganizationId, impression_type: ImpressionType
    ) -> int:
        return sum(
            1
            for i in self._impressions.values()
            if i.organization_id == organization_id and i.type == impression_type
        )

    async def count_in_window(
        self,
        organization_ids: List[OrganizationId],
        start: datetime,
        end: datetime,
    ) -> int:
        return sum(
            1
            for i in self._impressions.values()
            if i.organization_id in organization_ids and start <= i.created_at < end
        )
