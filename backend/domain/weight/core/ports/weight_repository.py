"""IWeightRepository port - repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from domain.user.core.value_objects.user_id import UserId

from ..entities.weight import Weight
from ..value_objects.weight_id import WeightId


class IWeightRepository(ABC):
    """Port for weight measurement persistence.

    Ordering is part of the contract: period queries return measurements
    oldest first (trend calculation relies on it), limited user queries
    return them newest first.
    """

    @abstractmethod
    async def save(self, weight: Weight) -> None:
        """Save measurement (create or update).

        Raises:
            RepositoryError: If storage fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, weight_id: WeightId) -> Optional[Weight]:
        """Find measurement by ID.

        Returns:
            Optional[Weight]: Measurement if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId, limit: int) -> List[Weight]:
        """Most recent measurements of a user, newest first.

        Args:
            user_id: Owning user
            limit: Maximum number of measurements
        """
        pass

    @abstractmethod
    async def find_by_user_id_and_period(
        self, user_id: UserId, from_: datetime, to: datetime
    ) -> List[Weight]:
        """Measurements with ``from_ <= measured_at <= to``, oldest first."""
        pass

    @abstractmethod
    async def find_latest_by_user_id(self, user_id: UserId) -> Optional[Weight]:
        """Most recent measurement of a user, None if there is none."""
        pass

    @abstractmethod
    async def count_by_user_id_and_date(self, user_id: UserId, day: datetime) -> int:
        """Count measurements of a user on the calendar day of ``day``."""
        pass

    @abstractmethod
    async def delete(self, weight_id: WeightId) -> bool:
        """Delete measurement.

        Returns:
            bool: True if deleted, False if it did not exist
        """
        pass
