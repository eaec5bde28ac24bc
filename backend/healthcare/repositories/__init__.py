# Repositories package initialization
# This file makes the repositories directory a Python package
# and allows importing repository modules

from . import appointment_repo, doctor_repo, filters, patient_repo

__all__ = [
    "appointment_repo",
    "doctor_repo",
    "filters",
    "patient_repo",
]
