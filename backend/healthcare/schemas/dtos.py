"""
Data Transfer Objects (DTOs) for API responses.

Entities use snake_case attributes; the JSON contract uses camelCase keys.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class DoctorResponse:
    """DTO for doctor API responses."""

    id: Optional[str]
    name: str
    specialization: str
    years_of_experience: int
    email: str
    phone_number: str

    @classmethod
    def from_domain(cls, doctor) -> "DoctorResponse":
        """Create response from domain entity."""
        return cls(
            id=doctor.id,
            name=doctor.name,
            specialization=doctor.specialization,
            years_of_experience=doctor.years_of_experience,
            email=doctor.email,
            phone_number=doctor.phone_number,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "specialization": self.specialization,
            "yearsOfExperience": self.years_of_experience,
            "email": self.email,
            "phoneNumber": self.phone_number,
        }


@dataclass
class PatientResponse:
    """DTO for patient API responses."""

    id: Optional[str]
    name: str
    age: int
    gender: str
    email: str
    phone_number: str

    @classmethod
    def from_domain(cls, patient) -> "PatientResponse":
        """Create response from domain entity."""
        return cls(
            id=patient.id,
            name=patient.name,
            age=patient.age,
            gender=patient.gender,
            email=patient.email,
            phone_number=patient.phone_number,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "email": self.email,
            "phoneNumber": self.phone_number,
        }


@dataclass
class AppointmentResponse:
    """DTO for appointment API responses."""

    id: Optional[str]
    date_time: Optional[datetime]
    reason: str
    patient_id: str
    doctor_id: str

    @classmethod
    def from_domain(cls, appointment) -> "AppointmentResponse":
        """Create response from domain entity."""
        return cls(
            id=appointment.id,
            date_time=appointment.date_time,
            reason=appointment.reason,
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "dateTime": self.date_time.isoformat() if self.date_time else None,
            "reason": self.reason,
            "patientId": self.patient_id,
            "doctorId": self.doctor_id,
        }
