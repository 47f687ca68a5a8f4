"""
SQLAlchemy models for Medication and Schedule entities.
"""

import datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from medminder.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class MedicationModel(Base, TimestampMixin):
    """
    SQLAlchemy model for a user's medication.

    This model maps to the 'medications' table.
    """

    __tablename__ = "medications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    active_substance: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    dosage: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    form: Mapped[str] = mapped_column(String(32), nullable=False)  # e.g., tablet, syrup
    package_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    expiration_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    added_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    barcode: Mapped[str | None] = mapped_column(String(64), nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(String(255), nullable=True)
    leaflet_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    def __repr__(self) -> str:
        return f"<MedicationModel(id={self.id}, name='{self.name}')>"


class ScheduleModel(Base, TimestampMixin):
    """
    SQLAlchemy model for a recurring dosing schedule.

    ``medication_id`` is a plain reference, not a foreign key: a medication
    can be deleted while its schedules remain.
    """

    __tablename__ = "schedules"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    medication_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    times: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    days_of_week: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    dosage_amount: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    start_date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    reminder_minutes_before: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    def __repr__(self) -> str:
        return f"<ScheduleModel(id={self.id}, medication_id={self.medication_id})>"
