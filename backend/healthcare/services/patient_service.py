"""Patient service: CRUD and search over patients."""

import logging
from typing import List, Optional

from healthcare.core.exceptions import EntityNotFoundError
from healthcare.domain.entities import Patient, mutable_fields
from healthcare.domain.interfaces import IPatientRepository

logger = logging.getLogger(__name__)


class PatientService:
    """Application service for patient-related use-cases."""

    def __init__(self, patient_repo: IPatientRepository) -> None:
        self.patient_repo = patient_repo

    def create_patient(self, patient: Patient) -> Patient:
        created = self.patient_repo.create(patient)
        logger.info("Patient created", extra={"context": {"patient_id": created.id}})
        return created

    def get_all_patients(self) -> List[Patient]:
        return self.patient_repo.get_all()

    def get_patient_by_id(self, patient_id: str) -> Optional[Patient]:
        return self.patient_repo.get_by_id(patient_id)

    def update_patient(self, patient_id: str, updated_patient: Patient) -> Patient:
        """Full replace of every field but the ID; raises EntityNotFoundError."""
        existing = self.patient_repo.get_by_id(patient_id)
        if existing is None:
            logger.warning(
                "Patient update for unknown ID",
                extra={"context": {"patient_id": patient_id}},
            )
            raise EntityNotFoundError("Patient", patient_id)

        for name in mutable_fields(existing):
            setattr(existing, name, getattr(updated_patient, name))

        saved = self.patient_repo.update(existing)
        logger.info("Patient updated", extra={"context": {"patient_id": patient_id}})
        return saved

    def delete_patient(self, patient_id: str) -> None:
        if not self.patient_repo.exists(patient_id):
            logger.warning(
                "Patient delete for unknown ID",
                extra={"context": {"patient_id": patient_id}},
            )
            raise EntityNotFoundError("Patient", patient_id)
        self.patient_repo.delete_by_id(patient_id)
        logger.info("Patient deleted", extra={"context": {"patient_id": patient_id}})

    def find_patients_by_age_greater_than(self, age: int) -> List[Patient]:
        return self.patient_repo.find_by_age_greater_than(age)

    def find_patients_by_gender(self, gender: str) -> List[Patient]:
        return self.patient_repo.find_by_gender_ignore_case(gender)

    def search_patients_by_name(self, keyword: str) -> List[Patient]:
        return self.patient_repo.find_by_name_containing_ignore_case(keyword)

    def find_patient_by_email(self, email: str) -> Optional[Patient]:
        return self.patient_repo.find_by_email(email)
