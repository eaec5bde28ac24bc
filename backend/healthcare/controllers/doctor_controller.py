"""
Doctor controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only (parsing, validation, status codes)
- Builds the session -> repository -> service chain per request
- Leaves store failures to the app-level error handler
"""

from flask import Blueprint, jsonify, request

from healthcare.core.api_utils import (
    api_response,
    get_json_payload,
    not_found_response,
    validation_error_response,
)
from healthcare.core.exceptions import EntityNotFoundError
from healthcare.core.limiter_config import limiter
from healthcare.core.validation import ensure_int_range, validate_doctor
from healthcare.db.session import SessionLocal
from healthcare.domain.entities import Doctor
from healthcare.repositories.doctor_repo import DoctorRepository
from healthcare.schemas.dtos import DoctorResponse
from healthcare.services.doctor_service import DoctorService

doctor_bp = Blueprint("doctors", __name__, url_prefix="/api/doctors")


def _serialize(doctors):
    return [DoctorResponse.from_domain(d).to_dict() for d in doctors]


# --- CRUD Endpoints ---


@doctor_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_doctor():
    """Create a new doctor; 201 with the stored doctor, or 400."""
    result = validate_doctor(get_json_payload())
    if not result.is_valid:
        return validation_error_response(result.errors)

    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        created = service.create_doctor(Doctor(**result.cleaned_data))
        return jsonify(DoctorResponse.from_domain(created).to_dict()), 201
    finally:
        db.close()


@doctor_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def get_all_doctors():
    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        return jsonify(_serialize(service.get_all_doctors())), 200
    finally:
        db.close()


@doctor_bp.route("/<doctor_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_doctor_by_id(doctor_id):
    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        doctor = service.get_doctor_by_id(doctor_id)
        if doctor is None:
            return not_found_response(f"Doctor not found with ID: {doctor_id}")
        return jsonify(DoctorResponse.from_domain(doctor).to_dict()), 200
    finally:
        db.close()


@doctor_bp.route("/<doctor_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_doctor(doctor_id):
    """Replace every field of a doctor; 200, 400 or 404."""
    result = validate_doctor(get_json_payload())
    if not result.is_valid:
        return validation_error_response(result.errors)

    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        try:
            updated = service.update_doctor(doctor_id, Doctor(**result.cleaned_data))
        except EntityNotFoundError as e:
            return not_found_response(str(e))
        return jsonify(DoctorResponse.from_domain(updated).to_dict()), 200
    finally:
        db.close()


@doctor_bp.route("/<doctor_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_doctor(doctor_id):
    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        try:
            service.delete_doctor(doctor_id)
        except EntityNotFoundError as e:
            return not_found_response(str(e))
        return "", 204
    finally:
        db.close()


# --- Custom Query Endpoints ---


@doctor_bp.route("/specialization/<specialization>", methods=["GET"])
@limiter.limit("100 per minute")
def get_doctors_by_specialization(specialization):
    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        doctors = service.find_doctors_by_specialization(specialization)
        return jsonify(_serialize(doctors)), 200
    finally:
        db.close()


@doctor_bp.route("/experience-above/<int(signed=True):years>", methods=["GET"])
@limiter.limit("100 per minute")
def get_doctors_by_experience_greater_than(years):
    ensure_int_range(years, "years")
    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        doctors = service.find_doctors_by_years_of_experience_greater_than(years)
        return jsonify(_serialize(doctors)), 200
    finally:
        db.close()


@doctor_bp.route("/search-by-name", methods=["GET"])
@limiter.limit("100 per minute")
def search_doctors_by_name():
    """GET /api/doctors/search-by-name?keyword=smith"""
    keyword = request.args.get("keyword")
    if keyword is None:
        return api_response(False, "keyword query parameter is required", None, 400)

    db = SessionLocal()
    try:
        service = DoctorService(DoctorRepository(db))
        return jsonify(_serialize(service.search_doctors_by_name(keyword))), 200
    finally:
        db.close()
