"""Database health probe interface."""

from abc import ABC, abstractmethod


class HealthRepository(ABC):
    """Connectivity probe for the backing store."""

    @abstractmethod
    async def ping(self) -> None:
        """Run a trivial round-trip query.

        Raises:
            Exception: Whatever the driver raises when the store is unreachable
        """
        pass
