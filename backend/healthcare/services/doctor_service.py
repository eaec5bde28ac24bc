"""
Doctor service for business logic.

This service:
- Keeps business rules separate from controllers and repositories
- Depends on the IDoctorRepository abstraction, not a concrete store
- Works with domain entities, not database models

Payloads are validated at the HTTP boundary before they get here.
"""

import logging
from typing import List, Optional

from healthcare.core.exceptions import EntityNotFoundError
from healthcare.domain.entities import Doctor, mutable_fields
from healthcare.domain.interfaces import IDoctorRepository

logger = logging.getLogger(__name__)


class DoctorService:
    """Application service for doctor-related use-cases."""

    def __init__(self, doctor_repo: IDoctorRepository) -> None:
        self.doctor_repo = doctor_repo

    # --- CRUD Operations ---

    def create_doctor(self, doctor: Doctor) -> Doctor:
        """Persist a new doctor and return it with its generated ID.

        Duplicate emails are accepted.
        """
        created = self.doctor_repo.create(doctor)
        logger.info("Doctor created", extra={"context": {"doctor_id": created.id}})
        return created

    def get_all_doctors(self) -> List[Doctor]:
        return self.doctor_repo.get_all()

    def get_doctor_by_id(self, doctor_id: str) -> Optional[Doctor]:
        """Return the doctor, or None when no doctor has this ID."""
        return self.doctor_repo.get_by_id(doctor_id)

    def update_doctor(self, doctor_id: str, updated_doctor: Doctor) -> Doctor:
        """Overwrite every field of an existing doctor except its ID.

        Raises:
            EntityNotFoundError: if no doctor has this ID
        """
        existing = self.doctor_repo.get_by_id(doctor_id)
        if existing is None:
            logger.warning(
                "Doctor update for unknown ID",
                extra={"context": {"doctor_id": doctor_id}},
            )
            raise EntityNotFoundError("Doctor", doctor_id)

        for name in mutable_fields(existing):
            setattr(existing, name, getattr(updated_doctor, name))

        saved = self.doctor_repo.update(existing)
        logger.info("Doctor updated", extra={"context": {"doctor_id": doctor_id}})
        return saved

    def delete_doctor(self, doctor_id: str) -> None:
        """Delete a doctor.

        Raises:
            EntityNotFoundError: if no doctor has this ID
        """
        if not self.doctor_repo.exists(doctor_id):
            logger.warning(
                "Doctor delete for unknown ID",
                extra={"context": {"doctor_id": doctor_id}},
            )
            raise EntityNotFoundError("Doctor", doctor_id)
        self.doctor_repo.delete_by_id(doctor_id)
        logger.info("Doctor deleted", extra={"context": {"doctor_id": doctor_id}})

    # --- Search ---

    def find_doctors_by_specialization(self, specialization: str) -> List[Doctor]:
        """Case-insensitive exact match on specialization."""
        return self.doctor_repo.find_by_specialization_ignore_case(specialization)

    def find_doctors_by_years_of_experience_greater_than(
        self, years: int
    ) -> List[Doctor]:
        """Doctors with strictly more than ``years`` of experience."""
        return self.doctor_repo.find_by_years_of_experience_greater_than(years)

    def search_doctors_by_name(self, keyword: str) -> List[Doctor]:
        """Case-insensitive substring match on name."""
        return self.doctor_repo.find_by_name_containing_ignore_case(keyword)

    def find_doctor_by_email(self, email: str) -> Optional[Doctor]:
        return self.doctor_repo.find_by_email(email)
