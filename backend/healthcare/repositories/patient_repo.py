"""Patient repository: CRUD plus the patient search queries."""

from typing import List, Optional

from healthcare.db.base import Patient as DbPatient
from healthcare.domain.entities import Patient as DomainPatient
from healthcare.domain.interfaces import IPatientRepository
from healthcare.repositories import filters
from healthcare.repositories.base_repo import SQLAlchemyRepository


class PatientRepository(SQLAlchemyRepository[DomainPatient], IPatientRepository):
    """Repository for Patient persistence operations."""

    model = DbPatient
    entity = DomainPatient

    def find_by_age_greater_than(self, age: int) -> List[DomainPatient]:
        return self.find(filters.age_greater_than(age))

    def find_by_gender_ignore_case(self, gender: str) -> List[DomainPatient]:
        return self.find(filters.gender_equals_ignore_case(gender))

    def find_by_name_containing_ignore_case(self, keyword: str) -> List[DomainPatient]:
        return self.find(filters.name_contains_ignore_case(DbPatient, keyword))

    def find_by_email(self, email: str) -> Optional[DomainPatient]:
        return self.find_one(filters.email_equals(DbPatient, email))
