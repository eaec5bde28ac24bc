"""Doctor repository: CRUD plus the doctor search queries."""

from typing import List, Optional

from healthcare.db.base import Doctor as DbDoctor
from healthcare.domain.entities import Doctor as DomainDoctor
from healthcare.domain.interfaces import IDoctorRepository
from healthcare.repositories import filters
from healthcare.repositories.base_repo import SQLAlchemyRepository


class DoctorRepository(SQLAlchemyRepository[DomainDoctor], IDoctorRepository):
    """Repository for Doctor persistence operations."""

    model = DbDoctor
    entity = DomainDoctor

    def find_by_specialization_ignore_case(
        self, specialization: str
    ) -> List[DomainDoctor]:
        return self.find(filters.specialization_equals_ignore_case(specialization))

    def find_by_years_of_experience_greater_than(
        self, years: int
    ) -> List[DomainDoctor]:
        return self.find(filters.experience_greater_than(years))

    def find_by_name_containing_ignore_case(self, keyword: str) -> List[DomainDoctor]:
        return self.find(filters.name_contains_ignore_case(DbDoctor, keyword))

    def find_by_email(self, email: str) -> Optional[DomainDoctor]:
        return self.find_one(filters.email_equals(DbDoctor, email))
