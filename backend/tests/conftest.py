"""
Central pytest configuration for the healthcare records tests.

Environment variables are set before any application module is imported so
the lazily-built engine points at a shared in-memory SQLite database.
"""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["TESTING"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "0"  # Disable rate limiting in tests
os.environ["LOG_TO_FILE"] = "false"
os.environ["TZ"] = "UTC"

from datetime import datetime  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from healthcare.db.session import SessionLocal, create_tables, drop_tables  # noqa: E402
from healthcare.domain.entities import Appointment, Doctor, Patient  # noqa: E402
from healthcare.repositories.appointment_repo import AppointmentRepository  # noqa: E402
from healthcare.repositories.doctor_repo import DoctorRepository  # noqa: E402
from healthcare.repositories.patient_repo import PatientRepository  # noqa: E402

# =====================================================
# DATABASE FIXTURES
# =====================================================


@pytest.fixture
def clean_tables():
    """Create every table before the test and drop them afterwards."""
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def db_session(clean_tables):
    """Provide a session on the shared in-memory database."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(clean_tables):
    from healthcare.main import create_app

    application = create_app()
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


# =====================================================
# MOCK REPOSITORY FIXTURES
# =====================================================


@pytest.fixture
def mock_doctor_repo():
    return Mock(spec=DoctorRepository)


@pytest.fixture
def mock_patient_repo():
    return Mock(spec=PatientRepository)


@pytest.fixture
def mock_appointment_repo():
    return Mock(spec=AppointmentRepository)


# =====================================================
# DOMAIN AND PAYLOAD FIXTURES
# =====================================================


@pytest.fixture
def make_doctor():
    def _make(**overrides):
        values = {
            "name": "Alice Smith",
            "specialization": "Cardiology",
            "years_of_experience": 5,
            "email": "alice@clinic.com",
            "phone_number": "5551234567",
        }
        values.update(overrides)
        return Doctor(**values)

    return _make


@pytest.fixture
def make_patient():
    def _make(**overrides):
        values = {
            "name": "Jane Doe",
            "age": 30,
            "gender": "Female",
            "email": "jane@x.com",
            "phone_number": "1234567890",
        }
        values.update(overrides)
        return Patient(**values)

    return _make


@pytest.fixture
def make_appointment():
    def _make(**overrides):
        values = {
            "date_time": datetime(2025, 3, 1, 9, 30),
            "reason": "Annual check-up",
            "patient_id": "patient-1",
            "doctor_id": "doctor-1",
        }
        values.update(overrides)
        return Appointment(**values)

    return _make


@pytest.fixture
def doctor_payload():
    return {
        "name": "Alice Smith",
        "specialization": "Cardiology",
        "yearsOfExperience": 5,
        "email": "alice@clinic.com",
        "phoneNumber": "5551234567",
    }


@pytest.fixture
def patient_payload():
    return {
        "name": "Jane Doe",
        "age": 30,
        "gender": "Female",
        "email": "jane@x.com",
        "phoneNumber": "1234567890",
    }


@pytest.fixture
def appointment_payload():
    return {
        "dateTime": "2025-03-01T09:30:00",
        "reason": "Annual check-up",
        "patientId": "patient-1",
        "doctorId": "doctor-1",
    }
