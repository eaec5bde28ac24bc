"""
Domain entities - Pure business records, no framework dependencies.

Validation lives in healthcare.core.validation and runs at the HTTP
boundary, so constructing an entity never raises.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional, Tuple


@dataclass
class Doctor:
    """Domain entity representing a Doctor."""

    name: str = ""
    specialization: str = ""
    years_of_experience: int = 0
    email: str = ""
    phone_number: str = ""
    id: Optional[str] = None


@dataclass
class Patient:
    """Domain entity representing a Patient."""

    name: str = ""
    age: int = 0
    gender: str = ""
    email: str = ""
    phone_number: str = ""
    id: Optional[str] = None


@dataclass
class Appointment:
    """Domain entity for an Appointment.

    patient_id and doctor_id are plain references; nothing checks that the
    records they name exist.
    """

    date_time: Optional[datetime] = None
    reason: str = ""
    patient_id: str = ""
    doctor_id: str = ""
    id: Optional[str] = None


def mutable_fields(entity) -> Tuple[str, ...]:
    """Names of every field an update overwrites (everything except id)."""
    return tuple(f.name for f in fields(entity) if f.name != "id")
