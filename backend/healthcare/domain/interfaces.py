"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from .entities import Appointment, Doctor, Patient

EntityT = TypeVar("EntityT")


class IEntityReader(ABC, Generic[EntityT]):
    """Read operations shared by every collection."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[EntityT]:
        """Get entity by ID, or None when absent."""
        pass

    @abstractmethod
    def get_all(self) -> List[EntityT]:
        """Get every entity in store-native order."""
        pass

    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        """Check whether an entity with this ID is stored."""
        pass


class IEntityWriter(ABC, Generic[EntityT]):
    """Write operations shared by every collection."""

    @abstractmethod
    def create(self, entity: EntityT) -> EntityT:
        """Persist a new entity; the store assigns its ID."""
        pass

    @abstractmethod
    def update(self, entity: EntityT) -> EntityT:
        """Overwrite every mutable field of the stored entity with entity.id."""
        pass

    @abstractmethod
    def delete_by_id(self, entity_id: str) -> None:
        """Remove the entity with this ID."""
        pass


class IDoctorRepository(IEntityReader[Doctor], IEntityWriter[Doctor]):
    """Complete doctor repository interface."""

    @abstractmethod
    def find_by_specialization_ignore_case(self, specialization: str) -> List[Doctor]:
        pass

    @abstractmethod
    def find_by_years_of_experience_greater_than(self, years: int) -> List[Doctor]:
        pass

    @abstractmethod
    def find_by_name_containing_ignore_case(self, keyword: str) -> List[Doctor]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Doctor]:
        pass


class IPatientRepository(IEntityReader[Patient], IEntityWriter[Patient]):
    """Complete patient repository interface."""

    @abstractmethod
    def find_by_age_greater_than(self, age: int) -> List[Patient]:
        pass

    @abstractmethod
    def find_by_gender_ignore_case(self, gender: str) -> List[Patient]:
        pass

    @abstractmethod
    def find_by_name_containing_ignore_case(self, keyword: str) -> List[Patient]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Patient]:
        pass


class IAppointmentRepository(IEntityReader[Appointment], IEntityWriter[Appointment]):
    """Complete appointment repository interface."""

    @abstractmethod
    def find_by_patient_id(self, patient_id: str) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_doctor_id(self, doctor_id: str) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_date_time_between(
        self, start: datetime, end: datetime
    ) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_doctor_id_and_date_time_from(
        self, doctor_id: str, since: datetime
    ) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_patient_id_and_date_time_until(
        self, patient_id: str, until: datetime
    ) -> List[Appointment]:
        pass
