"""Appointment repository: CRUD plus lookups by participant and time."""

from datetime import datetime
from typing import List

from healthcare.db.base import Appointment as DbAppointment
from healthcare.domain.entities import Appointment as DomainAppointment
from healthcare.domain.interfaces import IAppointmentRepository
from healthcare.repositories import filters
from healthcare.repositories.base_repo import SQLAlchemyRepository


class AppointmentRepository(
    SQLAlchemyRepository[DomainAppointment], IAppointmentRepository
):
    """Repository for Appointment persistence operations."""

    model = DbAppointment
    entity = DomainAppointment

    def find_by_patient_id(self, patient_id: str) -> List[DomainAppointment]:
        return self.find(filters.patient_id_equals(patient_id))

    def find_by_doctor_id(self, doctor_id: str) -> List[DomainAppointment]:
        return self.find(filters.doctor_id_equals(doctor_id))

    def find_by_date_time_between(
        self, start: datetime, end: datetime
    ) -> List[DomainAppointment]:
        return self.find(filters.date_time_between(start, end))

    def find_by_doctor_id_and_date_time_from(
        self, doctor_id: str, since: datetime
    ) -> List[DomainAppointment]:
        return self.find(
            filters.doctor_id_equals(doctor_id),
            filters.date_time_at_or_after(since),
        )

    def find_by_patient_id_and_date_time_until(
        self, patient_id: str, until: datetime
    ) -> List[DomainAppointment]:
        return self.find(
            filters.patient_id_equals(patient_id),
            filters.date_time_at_or_before(until),
        )
