"""
SQLAlchemy model for persisted dose status overrides.
"""

import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from medminder.infrastructure.persistence.sqlalchemy.models.base import Base


class DoseStatusModel(Base):
    """
    One explicit taken/skipped action, keyed by the dose identity key.

    This model maps to the 'dose_statuses' table.
    """

    __tablename__ = "dose_statuses"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    schedule_id: Mapped[str] = mapped_column(String(64), nullable=False)
    medication_id: Mapped[str] = mapped_column(String(64), nullable=False)
    scheduled_time: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    taken_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<DoseStatusModel(key={self.key}, status={self.status})>"
