"""Waitlist repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dealort.domain.model import WaitlistEntry
from dealort.domain.value import Email


class WaitlistRepository(ABC):
    """Repository for WaitlistEntry entity."""

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[WaitlistEntry]:
        """Find a waitlist entry by email.

        Args:
            email: Normalized email address

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, entry: WaitlistEntry) -> WaitlistEntry:
        """Save a waitlist entry."""
        pass
