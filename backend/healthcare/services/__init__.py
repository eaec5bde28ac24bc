# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import appointment_service, doctor_service, patient_service

__all__ = [
    "appointment_service",
    "doctor_service",
    "patient_service",
]
