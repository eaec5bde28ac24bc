"""
Appointment service.

Appointments reference a patient and a doctor by ID only. Neither
reference is checked against the stored patients or doctors, and no
conflict detection is done between overlapping appointments.
"""

import logging
from datetime import datetime
from typing import List, Optional

from healthcare.core.exceptions import EntityNotFoundError
from healthcare.domain.entities import Appointment, mutable_fields
from healthcare.domain.interfaces import IAppointmentRepository

logger = logging.getLogger(__name__)


class AppointmentService:
    """Application service for appointment use-cases."""

    def __init__(self, appointment_repo: IAppointmentRepository) -> None:
        self.appointment_repo = appointment_repo

    def create_appointment(self, appointment: Appointment) -> Appointment:
        created = self.appointment_repo.create(appointment)
        logger.info(
            "Appointment created",
            extra={
                "context": {
                    "appointment_id": created.id,
                    "patient_id": created.patient_id,
                    "doctor_id": created.doctor_id,
                }
            },
        )
        return created

    def get_all_appointments(self) -> List[Appointment]:
        return self.appointment_repo.get_all()

    def get_appointment_by_id(self, appointment_id: str) -> Optional[Appointment]:
        return self.appointment_repo.get_by_id(appointment_id)

    def update_appointment(
        self, appointment_id: str, updated_appointment: Appointment
    ) -> Appointment:
        """Full replace of every field but the ID.

        Raises:
            EntityNotFoundError: if no appointment has this ID
        """
        existing = self.appointment_repo.get_by_id(appointment_id)
        if existing is None:
            logger.warning(
                "Appointment update for unknown ID",
                extra={"context": {"appointment_id": appointment_id}},
            )
            raise EntityNotFoundError("Appointment", appointment_id)

        for name in mutable_fields(existing):
            setattr(existing, name, getattr(updated_appointment, name))

        saved = self.appointment_repo.update(existing)
        logger.info(
            "Appointment updated",
            extra={"context": {"appointment_id": appointment_id}},
        )
        return saved

    def delete_appointment(self, appointment_id: str) -> None:
        """Raises EntityNotFoundError if no appointment has this ID."""
        if not self.appointment_repo.exists(appointment_id):
            logger.warning(
                "Appointment delete for unknown ID",
                extra={"context": {"appointment_id": appointment_id}},
            )
            raise EntityNotFoundError("Appointment", appointment_id)
        self.appointment_repo.delete_by_id(appointment_id)
        logger.info(
            "Appointment deleted",
            extra={"context": {"appointment_id": appointment_id}},
        )

    def find_appointments_by_patient(self, patient_id: str) -> List[Appointment]:
        return self.appointment_repo.find_by_patient_id(patient_id)

    def find_appointments_by_doctor(self, doctor_id: str) -> List[Appointment]:
        return self.appointment_repo.find_by_doctor_id(doctor_id)

    def find_appointments_between(
        self, start: datetime, end: datetime
    ) -> List[Appointment]:
        """Appointments with start <= date_time <= end."""
        if end < start:
            raise ValueError("end must not be before start")
        return self.appointment_repo.find_by_date_time_between(start, end)

    def find_upcoming_for_doctor(
        self, doctor_id: str, since: datetime
    ) -> List[Appointment]:
        """A doctor's appointments at or after ``since``."""
        return self.appointment_repo.find_by_doctor_id_and_date_time_from(
            doctor_id, since
        )

    def find_history_for_patient(
        self, patient_id: str, until: datetime
    ) -> List[Appointment]:
        """A patient's appointments at or before ``until``."""
        return self.appointment_repo.find_by_patient_id_and_date_time_until(
            patient_id, until
        )
