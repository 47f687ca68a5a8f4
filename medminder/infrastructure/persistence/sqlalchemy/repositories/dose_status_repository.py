"""
SQLAlchemy implementation of the DoseStatusRepository.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from medminder.domain.entities.dose import DoseStatusRecord
from medminder.domain.exceptions import DatabaseConnectionException
from medminder.domain.repositories.dose_status_repository import DoseStatusRepository
from medminder.infrastructure.persistence.sqlalchemy.mappers.dose_status_mapper import (
    map_dose_status_model_to_record,
    map_dose_status_record_to_model,
)
from medminder.infrastructure.persistence.sqlalchemy.models.dose_status import DoseStatusModel

logger = logging.getLogger(__name__)


class SQLAlchemyDoseStatusRepository(DoseStatusRepository):
    """Stores dose status overrides in the 'dose_statuses' table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_overrides_by_user(self, user_id: str) -> dict[str, DoseStatusRecord]:
        try:
            stmt = select(DoseStatusModel).where(DoseStatusModel.user_id == user_id)
            result = await self.session.execute(stmt)
            return {
                model.key: map_dose_status_model_to_record(model)
                for model in result.scalars().all()
            }
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving dose statuses for user {user_id}: {e}")
            raise DatabaseConnectionException(
                f"Database error retrieving dose statuses for user {user_id}: {e!s}"
            ) from e

    async def put_override(self, key: str, record: DoseStatusRecord) -> None:
        """Upsert the row stored under ``key``."""
        try:
            await self.session.merge(map_dose_status_record_to_model(key, record))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error storing dose status {key}: {e}")
            raise DatabaseConnectionException(f"Database error storing dose status: {e!s}") from e
