"""
Domain exceptions package.
"""

from medminder.domain.exceptions.base import DomainException
from medminder.domain.exceptions.repository import (
    DatabaseConnectionException,
    EntityNotFoundException,
    MedicationNotFoundException,
    RepositoryException,
    RepositoryTimeoutException,
)

__all__ = [
    "DatabaseConnectionException",
    "DomainException",
    "EntityNotFoundException",
    "MedicationNotFoundException",
    "RepositoryException",
    "RepositoryTimeoutException",
]
