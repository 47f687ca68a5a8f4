"""
Base exception for the medication tracking domain.

Services catch ``DomainException`` at the edges where a failed lookup or write
must not stop dose tracking, such as the quantity sync after a dose is taken.
"""


class DomainException(Exception):
    """Raised by medication, schedule and dose-status operations."""

    def __init__(self, message: str = "Medication tracking error"):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
