"""
Repository interface for medications and their schedules.

This module defines the repository pattern for the medication data the dose
engines consume, following clean architecture principles with proper domain
abstractions.
"""

from abc import ABC, abstractmethod

from medminder.domain.entities.medication import Medication
from medminder.domain.entities.schedule import Schedule


class MedicationRepository(ABC):
    """
    Repository interface for Medication and Schedule entities.

    Implementations may be local (in-memory) or remote-backed; the engines
    only ever see this contract.
    """

    @abstractmethod
    async def list_medications_by_user(self, user_id: str) -> list[Medication]:
        """
        Retrieve all medications owned by a user.

        Args:
            user_id: ID of the owning user

        Returns:
            List[Medication]: The user's medications

        Raises:
            RepositoryException: If there's an error accessing the repository
        """
        pass

    @abstractmethod
    async def list_schedules_by_user(self, user_id: str) -> list[Schedule]:
        """
        Retrieve the active schedules of a user.

        Inactive schedules are not returned.

        Args:
            user_id: ID of the owning user

        Returns:
            List[Schedule]: The user's active schedules

        Raises:
            RepositoryException: If there's an error accessing the repository
        """
        pass

    @abstractmethod
    async def update_medication_quantity(self, medication_id: str, quantity: int) -> None:
        """
        Persist a new remaining quantity for a medication.

        Args:
            medication_id: ID of the medication
            quantity: New remaining quantity

        Raises:
            EntityNotFoundException: If the medication does not exist
            RepositoryException: If there's an error accessing the repository
        """
        pass
