"""
Domain package - Pure business records and repository contracts.

This package contains:
- entities.py: Doctor, Patient and Appointment records
- interfaces.py: Repository contracts
"""

from .entities import Appointment, Doctor, Patient
from .interfaces import (
    IAppointmentRepository,
    IDoctorRepository,
    IEntityReader,
    IEntityWriter,
    IPatientRepository,
)

__all__ = [
    # Domain entities
    "Doctor",
    "Patient",
    "Appointment",
    # Repository interfaces
    "IDoctorRepository",
    "IPatientRepository",
    "IAppointmentRepository",
    # Segregated interfaces
    "IEntityReader",
    "IEntityWriter",
]
