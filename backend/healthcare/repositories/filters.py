"""Filter construction for the named queries.

Each function builds one SQLAlchemy boolean clause that a repository passes
to ``find()``/``find_one()``.
"""

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from healthcare.db.base import Appointment as DbAppointment
from healthcare.db.base import Doctor as DbDoctor
from healthcare.db.base import Patient as DbPatient


def name_contains_ignore_case(model, keyword: str) -> ColumnElement[bool]:
    """Case-insensitive substring match on ``model.name``.

    The keyword is matched literally: LIKE wildcards and regex
    metacharacters in it match themselves.
    """
    return model.name.icontains(keyword, autoescape=True)


def email_equals(model, email: str) -> ColumnElement[bool]:
    return model.email == email


# Doctors


def specialization_equals_ignore_case(specialization: str) -> ColumnElement[bool]:
    return func.lower(DbDoctor.specialization) == func.lower(specialization)


def experience_greater_than(years: int) -> ColumnElement[bool]:
    """Strictly greater: a doctor with exactly ``years`` is excluded."""
    return DbDoctor.years_of_experience > years


# Patients


def age_greater_than(age: int) -> ColumnElement[bool]:
    """Strictly greater: a patient aged exactly ``age`` is excluded."""
    return DbPatient.age > age


def gender_equals_ignore_case(gender: str) -> ColumnElement[bool]:
    return func.lower(DbPatient.gender) == func.lower(gender)


# Appointments


def patient_id_equals(patient_id: str) -> ColumnElement[bool]:
    return DbAppointment.patient_id == patient_id


def doctor_id_equals(doctor_id: str) -> ColumnElement[bool]:
    return DbAppointment.doctor_id == doctor_id


def date_time_between(start: datetime, end: datetime) -> ColumnElement[bool]:
    """Inclusive on both ends."""
    return DbAppointment.date_time.between(start, end)


def date_time_at_or_after(since: datetime) -> ColumnElement[bool]:
    return DbAppointment.date_time >= since


def date_time_at_or_before(until: datetime) -> ColumnElement[bool]:
    return DbAppointment.date_time <= until
