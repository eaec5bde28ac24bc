"""
Patient controller for handling HTTP requests.
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
from healthcare.core.validation import ensure_int_range, validate_patient
from healthcare.db.session import SessionLocal
from healthcare.domain.entities import Patient
from healthcare.repositories.patient_repo import PatientRepository
from healthcare.schemas.dtos import PatientResponse
from healthcare.services.patient_service import PatientService

patient_bp = Blueprint("patients", __name__, url_prefix="/api/patients")


def _serialize(patients):
    return [PatientResponse.from_domain(p).to_dict() for p in patients]


@patient_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_patient():
    """POST /api/patients - 201 with the created patient, 400 if invalid."""
    result = validate_patient(get_json_payload())
    if not result.is_valid:
        return validation_error_response(result.errors)

    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        created = service.create_patient(Patient(**result.cleaned_data))
        return jsonify(PatientResponse.from_domain(created).to_dict()), 201
    finally:
        db.close()


@patient_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def get_all_patients():
    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        return jsonify(_serialize(service.get_all_patients())), 200
    finally:
        db.close()


@patient_bp.route("/<patient_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_patient_by_id(patient_id):
    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        patient = service.get_patient_by_id(patient_id)
        if patient is None:
            return not_found_response(f"Patient not found with ID: {patient_id}")
        return jsonify(PatientResponse.from_domain(patient).to_dict()), 200
    finally:
        db.close()


@patient_bp.route("/<patient_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_patient(patient_id):
    result = validate_patient(get_json_payload())
    if not result.is_valid:
        return validation_error_response(result.errors)

    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        try:
            updated = service.update_patient(
                patient_id, Patient(**result.cleaned_data)
            )
        except EntityNotFoundError as e:
            return not_found_response(str(e))
        return jsonify(PatientResponse.from_domain(updated).to_dict()), 200
    finally:
        db.close()


@patient_bp.route("/<patient_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_patient(patient_id):
    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        try:
            service.delete_patient(patient_id)
        except EntityNotFoundError as e:
            return not_found_response(str(e))
        return "", 204
    finally:
        db.close()


@patient_bp.route("/age-above/<int(signed=True):age>", methods=["GET"])
@limiter.limit("100 per minute")
def get_patients_by_age_greater_than(age):
    ensure_int_range(age, "age")
    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        patients = service.find_patients_by_age_greater_than(age)
        return jsonify(_serialize(patients)), 200
    finally:
        db.close()


@patient_bp.route("/gender/<gender>", methods=["GET"])
@limiter.limit("100 per minute")
def get_patients_by_gender(gender):
    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        return jsonify(_serialize(service.find_patients_by_gender(gender))), 200
    finally:
        db.close()


@patient_bp.route("/search-by-name", methods=["GET"])
@limiter.limit("100 per minute")
def search_patients_by_name():
    keyword = request.args.get("keyword")
    if keyword is None:
        return api_response(False, "keyword query parameter is required", None, 400)

    db = SessionLocal()
    try:
        service = PatientService(PatientRepository(db))
        return jsonify(_serialize(service.search_patients_by_name(keyword))), 200
    finally:
        db.close()
