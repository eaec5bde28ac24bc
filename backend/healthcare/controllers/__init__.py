# Controllers package initialization
# This file makes the controllers directory a Python package
# and allows importing controller modules

from . import (
    appointment_controller,
    doctor_controller,
    health_controller,
    patient_controller,
)

__all__ = [
    "appointment_controller",
    "doctor_controller",
    "health_controller",
    "patient_controller",
]
