"""
SQLAlchemy implementation of the MedicationRepository.

This module handles the translation between Medication/Schedule domain
entities and the 'medications' and 'schedules' tables.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from medminder.domain.entities.medication import Medication
from medminder.domain.entities.schedule import Schedule
from medminder.domain.exceptions import DatabaseConnectionException, MedicationNotFoundException
from medminder.domain.repositories.medication_repository import MedicationRepository
from medminder.infrastructure.persistence.sqlalchemy.mappers.medication_mapper import (
    map_medication_entity_to_model,
    map_medication_model_to_entity,
    map_schedule_entity_to_model,
    map_schedule_model_to_entity,
)
from medminder.infrastructure.persistence.sqlalchemy.models.medication import (
    MedicationModel,
    ScheduleModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyMedicationRepository(MedicationRepository):
    """SQLAlchemy implementation of the MedicationRepository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self.session = session

    async def save_medication(self, medication: Medication) -> Medication:
        """Insert or replace a medication."""
        try:
            await self.session.merge(map_medication_entity_to_model(medication))
            await self.session.commit()
            return medication
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error saving medication {medication.id}: {e}")
            raise DatabaseConnectionException(f"Database error saving medication: {e!s}") from e

    async def save_schedule(self, schedule: Schedule) -> Schedule:
        """Insert or replace a schedule."""
        try:
            await self.session.merge(map_schedule_entity_to_model(schedule))
            await self.session.commit()
            return schedule
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error saving schedule {schedule.id}: {e}")
            raise DatabaseConnectionException(f"Database error saving schedule: {e!s}") from e

    async def list_medications_by_user(self, user_id: str) -> list[Medication]:
        """Retrieve all medications owned by a user."""
        try:
            stmt = (
                select(MedicationModel)
                .where(MedicationModel.user_id == user_id)
                .order_by(MedicationModel.added_at)
            )
            result = await self.session.execute(stmt)
            return [map_medication_model_to_entity(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving medications for user {user_id}: {e}")
            raise DatabaseConnectionException(
                f"Database error retrieving medications for user {user_id}: {e!s}"
            ) from e

    async def list_schedules_by_user(self, user_id: str) -> list[Schedule]:
        """Retrieve the active schedules of a user."""
        try:
            stmt = select(ScheduleModel).where(
                ScheduleModel.user_id == user_id,
                ScheduleModel.is_active,
            )
            result = await self.session.execute(stmt)
            return [map_schedule_model_to_entity(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving schedules for user {user_id}: {e}")
            raise DatabaseConnectionException(
                f"Database error retrieving schedules for user {user_id}: {e!s}"
            ) from e

    async def update_medication_quantity(self, medication_id: str, quantity: int) -> None:
        """Persist a new remaining quantity, never below zero."""
        try:
            medication_model = await self.session.get(MedicationModel, medication_id)
            if medication_model is None:
                raise MedicationNotFoundException(medication_id)

            medication_model.current_quantity = max(0, quantity)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error updating quantity of medication {medication_id}: {e}")
            raise DatabaseConnectionException(
                f"Database error updating medication quantity: {e!s}"
            ) from e
