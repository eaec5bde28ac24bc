"""
Appointment controller for handling HTTP requests.

Timestamps in query strings use ISO-8601 (``2025-03-01T09:30:00``).
"""

from datetime import datetime
from typing import Optional

from flask import Blueprint, jsonify, request

from healthcare.core.api_utils import (
    api_response,
    get_json_payload,
    not_found_response,
    validation_error_response,
)
from healthcare.core.config import APP_TZ
from healthcare.core.exceptions import EntityNotFoundError
from healthcare.core.limiter_config import limiter
from healthcare.core.validation import (
    ValidationError,
    parse_datetime,
    validate_appointment,
)
from healthcare.db.session import SessionLocal
from healthcare.domain.entities import Appointment
from healthcare.repositories.appointment_repo import AppointmentRepository
from healthcare.schemas.dtos import AppointmentResponse
from healthcare.services.appointment_service import AppointmentService

appointment_bp = Blueprint("appointments", __name__, url_prefix="/api/appointments")


def _serialize(appointments):
    return [AppointmentResponse.from_domain(a).to_dict() for a in appointments]


def _datetime_arg(name: str, default: Optional[datetime] = None) -> datetime:
    """Read an ISO-8601 query parameter; a missing one falls back to default."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        if default is None:
            raise ValidationError(f"{name} query parameter is required", name)
        return default
    try:
        return parse_datetime(raw)
    except ValueError:
        raise ValidationError(
            f"{name} must be an ISO-8601 date and time", name
        ) from None


def _now() -> datetime:
    return datetime.now(APP_TZ).replace(tzinfo=None)


@appointment_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_appointment():
    result = validate_appointment(get_json_payload())
    if not result.is_valid:
        return validation_error_response(result.errors)

    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        created = service.create_appointment(Appointment(**result.cleaned_data))
        return jsonify(AppointmentResponse.from_domain(created).to_dict()), 201
    finally:
        db.close()


@appointment_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def get_all_appointments():
    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        return jsonify(_serialize(service.get_all_appointments())), 200
    finally:
        db.close()


@appointment_bp.route("/<appointment_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_appointment_by_id(appointment_id):
    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        appointment = service.get_appointment_by_id(appointment_id)
        if appointment is None:
            return not_found_response(
                f"Appointment not found with ID: {appointment_id}"
            )
        return jsonify(AppointmentResponse.from_domain(appointment).to_dict()), 200
    finally:
        db.close()


@appointment_bp.route("/<appointment_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_appointment(appointment_id):
    result = validate_appointment(get_json_payload())
    if not result.is_valid:
        return validation_error_response(result.errors)

    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        try:
            updated = service.update_appointment(
                appointment_id, Appointment(**result.cleaned_data)
            )
        except EntityNotFoundError as e:
            return not_found_response(str(e))
        return jsonify(AppointmentResponse.from_domain(updated).to_dict()), 200
    finally:
        db.close()


@appointment_bp.route("/<appointment_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_appointment(appointment_id):
    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        try:
            service.delete_appointment(appointment_id)
        except EntityNotFoundError as e:
            return not_found_response(str(e))
        return "", 204
    finally:
        db.close()


@appointment_bp.route("/patient/<patient_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_appointments_by_patient(patient_id):
    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        appointments = service.find_appointments_by_patient(patient_id)
        return jsonify(_serialize(appointments)), 200
    finally:
        db.close()


@appointment_bp.route("/doctor/<doctor_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_appointments_by_doctor(doctor_id):
    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        appointments = service.find_appointments_by_doctor(doctor_id)
        return jsonify(_serialize(appointments)), 200
    finally:
        db.close()


@appointment_bp.route("/between", methods=["GET"])
@limiter.limit("100 per minute")
def get_appointments_between():
    """GET /api/appointments/between?start=...&end=... (inclusive)"""
    start = _datetime_arg("start")
    end = _datetime_arg("end")
    if end < start:
        return api_response(False, "end must not be before start", None, 400)

    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        appointments = service.find_appointments_between(start, end)
        return jsonify(_serialize(appointments)), 200
    finally:
        db.close()


@appointment_bp.route("/doctor/<doctor_id>/upcoming", methods=["GET"])
@limiter.limit("100 per minute")
def get_upcoming_for_doctor(doctor_id):
    """A doctor's appointments at or after ?since= (default: now)."""
    since = _datetime_arg("since", default=_now())

    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        appointments = service.find_upcoming_for_doctor(doctor_id, since)
        return jsonify(_serialize(appointments)), 200
    finally:
        db.close()


@appointment_bp.route("/patient/<patient_id>/history", methods=["GET"])
@limiter.limit("100 per minute")
def get_history_for_patient(patient_id):
    """A patient's appointments at or before ?until= (default: now)."""
    until = _datetime_arg("until", default=_now())

    db = SessionLocal()
    try:
        service = AppointmentService(AppointmentRepository(db))
        appointments = service.find_history_for_patient(patient_id, until)
        return jsonify(_serialize(appointments)), 200
    finally:
        db.close()
