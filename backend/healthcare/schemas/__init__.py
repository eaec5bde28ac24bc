"""
Schemas package - Data Transfer Objects for the JSON API.
"""

from .dtos import AppointmentResponse, DoctorResponse, PatientResponse

__all__ = [
    "DoctorResponse",
    "PatientResponse",
    "AppointmentResponse",
]
