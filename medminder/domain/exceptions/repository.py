"""
Storage errors raised by medication and dose-status repositories.

Backends translate their own failures into these types so the services can
tell a missing medication from an unreachable store.
"""

from medminder.domain.exceptions.base import DomainException


class RepositoryException(DomainException):
    """A medication, schedule or dose-status store could not serve a call."""
    def __init__(self, message: str = "Medication store operation failed"):
        super().__init__(message)


class EntityNotFoundException(RepositoryException):
    """A record addressed by id is not in the store."""
    def __init__(self, message: str = "Record not found"):
        super().__init__(message)


class MedicationNotFoundException(EntityNotFoundException):
    """The medication being updated was deleted or never stored."""
    def __init__(self, medication_id: str):
        self.medication_id = medication_id
        super().__init__(f"Medication with ID {medication_id} not found")


class DatabaseConnectionException(RepositoryException):
    """The storage backend failed or rejected the statement."""
    def __init__(self, message: str = "Medication store is unavailable"):
        super().__init__(message)


class RepositoryTimeoutException(RepositoryException):
    """A repository call ran past ``REPOSITORY_TIMEOUT_SECONDS``."""
    def __init__(self, message: str = "Medication store call timed out"):
        super().__init__(message)
