"""
Repository interface for persisted dose status overrides.
"""

from abc import ABC, abstractmethod

from medminder.domain.entities.dose import DoseStatusRecord


class DoseStatusRepository(ABC):
    """
    Repository interface for DoseStatusRecord entities.

    Records are keyed by the dose identity key. Writing the same key twice
    replaces the earlier record.
    """

    @abstractmethod
    async def list_overrides_by_user(self, user_id: str) -> dict[str, DoseStatusRecord]:
        """
        Retrieve every persisted override of a user.

        This is a full scan; range filtering is the caller's job.

        Args:
            user_id: ID of the owning user

        Returns:
            Dict[str, DoseStatusRecord]: Records by dose identity key

        Raises:
            RepositoryException: If there's an error accessing the repository
        """
        pass

    @abstractmethod
    async def put_override(self, key: str, record: DoseStatusRecord) -> None:
        """
        Create or replace the override stored under ``key``.

        Args:
            key: Dose identity key
            record: The record to persist

        Raises:
            RepositoryException: If there's an error accessing the repository
        """
        pass
