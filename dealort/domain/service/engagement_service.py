"""Follow and like domain service."""

import logfire

from dealort.domain.error import NotFoundError
from dealort.domain.model import Follow, OrganizationImpression
from dealort.domain.repository import (
    FollowRepository,
    ImpressionRepository,
    OrganizationRepository,
)
from dealort.domain.value import (
    FollowId,
    ImpressionId,
    ImpressionType,
    OrganizationId,
    UserId,
    new_id,
)

from .base import Service


class EngagementService(Service):
    """Domain service for follows and organization impressions."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        impression_repository: ImpressionRepository,
        organization_repository: OrganizationRepository,
    ) -> None:
        """Initialize engagement service.

        Args:
            follow_repository: Follow repository
            impression_repository: Impression repository
            organization_repository: Organization repository (impression counter)
        """
        self.follow_repository = follow_repository
        self.impression_repository = impression_repository
        self.organization_repository = organization_repository

    async def _require_organization(self, organization_id: OrganizationId) -> None:
        if await self.organization_repository.find_by_id(organization_id) is None:
            raise NotFoundError("Organization", organization_id)

    async def follow(self, organization_id: OrganizationId, user_id: UserId) -> bool:
        """Follow an organization. Following twice is a no-op.

        Returns:
            True (the user now follows the organization)

        Raises:
            NotFoundError: If the organization does not exist
        """
        with logfire.span(
            "engagement_service.follow",
            organization_id=organization_id,
            user_id=user_id,
        ):
            await self._require_organization(organization_id)

            if await self.follow_repository.find(organization_id, user_id) is None:
                await self.follow_repository.save(
                    Follow(
                        id=FollowId(new_id()),
                        organization_id=organization_id,
                        user_id=user_id,
                    )
                )
                logfire.info(
                    "Organization followed",
                    organization_id=organization_id,
                    user_id=user_id,
                )
            return True

    async def unfollow(self, organization_id: OrganizationId, user_id: UserId) -> bool:
        """Unfollow an organization. Unfollowing twice is a no-op.

        Returns:
            False (the user no longer follows the organization)

        Raises:
            NotFoundError: If the organization does not exist
        """
        with logfire.span(
            "engagement_service.unfollow",
            organization_id=organization_id,
            user_id=user_id,
        ):
            await self._require_organization(organization_id)
            await self.follow_repository.delete(organization_id, user_id)
            return False

    async def toggle_impression(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        impression_type: ImpressionType = ImpressionType.LIKE,
    ) -> bool:
        """Add or remove the user's impression of an organization.

        The organization's ``impressions`` counter moves with every toggle
        through an atomic SQL increment/decrement.

        Returns:
            True if the impression now exists, False if it was removed

        Raises:
            NotFoundError: If the organization does not exist
        """
        with logfire.span(
            "engagement_service.toggle_impression",
            organization_id=organization_id,
            user_id=user_id,
            type=impression_type.value,
        ):
            await self._require_organization(organization_id)

            existing = await self.impression_repository.find(
                organization_id, user_id, impression_type
            )
            if existing is not None:
                await self.impression_repository.delete(existing.id)
                await self.organization_repository.decrement_impressions(
                    organization_id
                )
                logfire.info("Impression removed", organization_id=organization_id)
                return False

            await self.impression_repository.save(
                OrganizationImpression(
                    id=ImpressionId(new_id()),
                    organization_id=organization_id,
                    user_id=user_id,
                    type=impression_type,
                )
            )
            await self.organization_repository.increment_impressions(organization_id)
            logfire.info("Impression added", organization_id=organization_id)
            return True

    async def is_following(
        self, organization_id: OrganizationId, user_id: UserId | None
    ) -> bool:
        if user_id is None:
            return False
        return await self.follow_repository.find(organization_id, user_id) is not None

    async def has_liked(
        self, organization_id: OrganizationId, user_id: UserId | None
    ) -> bool:
        if user_id is None:
            return False
        like = await self.impression_repository.find(
            organization_id, user_id, ImpressionType.LIKE
        )
        return like is not None

    async def follower_count(self, organization_id: OrganizationId) -> int:
        return await self.follow_repository.count_by_organization(organization_id)

    async def like_count(self, organization_id: OrganizationId) -> int:
        return await self.impression_repository.count_by_organization(
            organization_id, ImpressionType.LIKE
        )
