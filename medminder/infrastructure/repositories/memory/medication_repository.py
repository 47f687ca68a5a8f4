"""
In-Memory Medication Repository Module.

This module provides an in-memory implementation of the medication repository
interface, storing medications and schedules in dictionaries.
"""

from medminder.domain.entities.medication import Medication
from medminder.domain.entities.schedule import Schedule
from medminder.domain.exceptions import MedicationNotFoundException
from medminder.domain.repositories.medication_repository import MedicationRepository


class InMemoryMedicationRepository(MedicationRepository):
    """
    In-memory implementation of the medication repository.

    Entities are copied on the way in and out so callers can never mutate
    stored state by accident.
    """

    def __init__(
        self,
        medications: list[Medication] | None = None,
        schedules: list[Schedule] | None = None,
    ) -> None:
        self._medications: dict[str, Medication] = {}
        self._schedules: dict[str, Schedule] = {}
        for medication in medications or []:
            self.add_medication(medication)
        for schedule in schedules or []:
            self.add_schedule(schedule)

    def add_medication(self, medication: Medication) -> Medication:
        self._medications[medication.id] = medication.model_copy(deep=True)
        return medication

    def add_schedule(self, schedule: Schedule) -> Schedule:
        self._schedules[schedule.id] = schedule.model_copy(deep=True)
        return schedule

    def remove_medication(self, medication_id: str) -> None:
        """Delete a medication; its schedules are left alone."""
        self._medications.pop(medication_id, None)

    def remove_schedule(self, schedule_id: str) -> None:
        self._schedules.pop(schedule_id, None)

    async def list_medications_by_user(self, user_id: str) -> list[Medication]:
        return [
            medication.model_copy(deep=True)
            for medication in self._medications.values()
            if medication.user_id == user_id
        ]

    async def list_schedules_by_user(self, user_id: str) -> list[Schedule]:
        return [
            schedule.model_copy(deep=True)
            for schedule in self._schedules.values()
            if schedule.user_id == user_id and schedule.is_active
        ]

    async def update_medication_quantity(self, medication_id: str, quantity: int) -> None:
        medication = self._medications.get(medication_id)
        if medication is None:
            raise MedicationNotFoundException(medication_id)
        self._medications[medication_id] = medication.model_copy(
            update={"current_quantity": max(0, quantity)}
        )
