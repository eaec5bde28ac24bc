"""
Validation for Doctor, Patient and Appointment payloads.

Controllers run the matching validator on every create and update body
before anything reaches a service. A validator never raises on bad input:
it collects every violated constraint into a ValidationResult so the
client gets the full list in one 400 response.
"""

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from healthcare.core.config import APP_TZ

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_DIGITS_PATTERN = re.compile(r"^[0-9]{10,15}$")

# Integer columns are 32-bit signed
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ValidationError(Exception):
    """Raised when a request cannot be validated at all (e.g. not a JSON object)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: List[str] = []
        self.is_valid: bool = True
        self.cleaned_data: Dict[str, Any] = {}

    def add_error(self, message: str, field: Optional[str] = None):
        """Add validation error."""
        error_msg = f"{field}: {message}" if field else message
        self.errors.append(error_msg)
        self.is_valid = False
        logger.info(f"Validation error: {error_msg}")


class BaseValidator:
    """Base validator with common validation methods."""

    def validate(
        self, data: Dict[str, Any]
    ) -> ValidationResult:  # pragma: no cover - interface definition
        """Validate data for a specific entity type."""
        raise NotImplementedError("Subclasses must implement validate")

    @staticmethod
    def validate_required_string(
        value: Any, field_name: str, result: ValidationResult, message: str
    ) -> Optional[str]:
        """Validate that a string field is present and not blank."""
        if value is None or (isinstance(value, str) and value.strip() == ""):
            result.add_error(message, field_name)
            return None
        if not isinstance(value, str):
            result.add_error("must be a string", field_name)
            return None
        return value.strip()

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[int] = None,
        min_message: Optional[str] = None,
    ) -> Optional[int]:
        """Validate a required integer field with an optional minimum."""
        if value is None or value == "":
            result.add_error("is required", field_name)
            return None

        # bool is an int subclass; true/false are not ages
        if isinstance(value, bool):
            result.add_error("must be an integer", field_name)
            return None

        if isinstance(value, int):
            int_value = value
        elif isinstance(value, float) and value.is_integer():
            int_value = int(value)
        elif isinstance(value, str) and re.fullmatch(r"-?\d+", value.strip()):
            int_value = int(value.strip())
        else:
            result.add_error("must be an integer", field_name)
            return None

        if min_value is not None and int_value < min_value:
            result.add_error(
                min_message or f"must be at least {min_value}", field_name
            )
            return None

        if int_value > INT_MAX:
            result.add_error(f"must be at most {INT_MAX}", field_name)
            return None

        return int_value

    @staticmethod
    def validate_email(
        value: Any,
        field_name: str,
        result: ValidationResult,
        required_message: str,
        message: str,
    ) -> Optional[str]:
        """Validate a required, well-formed email address."""
        email = BaseValidator.validate_required_string(
            value, field_name, result, required_message
        )
        if email is None:
            return None
        if not EMAIL_PATTERN.match(email):
            result.add_error(message, field_name)
            return None
        return email

    @staticmethod
    def validate_datetime(
        value: Any, field_name: str, result: ValidationResult, message: str
    ) -> Optional[datetime]:
        """Validate and convert an ISO-8601 timestamp."""
        if value is None or value == "":
            result.add_error(message, field_name)
            return None
        try:
            return parse_datetime(value)
        except (TypeError, ValueError):
            result.add_error("must be an ISO-8601 date and time", field_name)
            return None


def parse_datetime(value: Any) -> datetime:
    """
    Convert an ISO-8601 string (or datetime) to a naive local datetime.

    Aware values are shifted to the application timezone first, so every
    stored timestamp is comparable with every other.

    Raises:
        ValueError: for malformed strings
        TypeError: for values that are neither str nor datetime
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Unsupported datetime value: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(APP_TZ).replace(tzinfo=None)
    return parsed


def ensure_int_range(value: int, field_name: str) -> int:
    """
    Reject integers that do not fit a 32-bit column.

    Raises:
        ValidationError: when value is outside INT_MIN..INT_MAX
    """
    if not INT_MIN <= value <= INT_MAX:
        raise ValidationError(
            f"must be between {INT_MIN} and {INT_MAX}", field_name
        )
    return value


class DoctorValidator(BaseValidator):
    """Validator for Doctor payloads."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        name = self.validate_required_string(
            data.get("name"), "name", result, "Name cannot be empty"
        )
        specialization = self.validate_required_string(
            data.get("specialization"),
            "specialization",
            result,
            "Specialization cannot be empty",
        )
        years = self.validate_integer(
            data.get("yearsOfExperience"),
            "yearsOfExperience",
            result,
            min_value=0,
            min_message="Years of experience must be at least 0",
        )
        email = self.validate_email(
            data.get("email"),
            "email",
            result,
            "Email cannot be empty",
            "Invalid email format",
        )
        phone_number = self.validate_required_string(
            data.get("phoneNumber"),
            "phoneNumber",
            result,
            "Phone number cannot be empty",
        )

        if result.is_valid:
            result.cleaned_data = {
                "name": name,
                "specialization": specialization,
                "years_of_experience": years,
                "email": email,
                "phone_number": phone_number,
            }
        return result


class PatientValidator(BaseValidator):
    """Validator for Patient payloads."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        name = self.validate_required_string(
            data.get("name"), "name", result, "Patient name is required"
        )
        age = self.validate_integer(
            data.get("age"),
            "age",
            result,
            min_value=0,
            min_message="Age must be a positive integer",
        )
        gender = self.validate_required_string(
            data.get("gender"), "gender", result, "Gender is required"
        )
        email = self.validate_email(
            data.get("email"),
            "email",
            result,
            "Email is required",
            "Email should be valid",
        )
        phone_number = self.validate_required_string(
            data.get("phoneNumber"),
            "phoneNumber",
            result,
            "Phone number is required",
        )
        if phone_number is not None and not PHONE_DIGITS_PATTERN.match(phone_number):
            result.add_error(
                "Phone number must be between 10 and 15 digits", "phoneNumber"
            )

        if result.is_valid:
            result.cleaned_data = {
                "name": name,
                "age": age,
                "gender": gender,
                "email": email,
                "phone_number": phone_number,
            }
        return result


class AppointmentValidator(BaseValidator):
    """Validator for Appointment payloads.

    Only presence is checked for patientId/doctorId; whether they refer to
    stored records is not.
    """

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        date_time = self.validate_datetime(
            data.get("dateTime"),
            "dateTime",
            result,
            "Appointment date and time cannot be null",
        )
        reason = self.validate_required_string(
            data.get("reason"),
            "reason",
            result,
            "Reason for appointment cannot be empty",
        )
        patient_id = self.validate_required_string(
            data.get("patientId"), "patientId", result, "Patient ID cannot be empty"
        )
        doctor_id = self.validate_required_string(
            data.get("doctorId"), "doctorId", result, "Doctor ID cannot be empty"
        )

        if result.is_valid:
            result.cleaned_data = {
                "date_time": date_time,
                "reason": reason,
                "patient_id": patient_id,
                "doctor_id": doctor_id,
            }
        return result


def get_validator(entity_type: str) -> BaseValidator:
    """Get validator instance for entity type."""
    validators = {
        "doctor": DoctorValidator(),
        "patient": PatientValidator(),
        "appointment": AppointmentValidator(),
    }

    validator = validators.get(entity_type.lower())
    if not validator:
        raise ValueError(f"No validator found for entity type: {entity_type}")

    return validator


def validate_doctor(data: Dict[str, Any]) -> ValidationResult:
    return get_validator("doctor").validate(data)


def validate_patient(data: Dict[str, Any]) -> ValidationResult:
    return get_validator("patient").validate(data)


def validate_appointment(data: Dict[str, Any]) -> ValidationResult:
    return get_validator("appointment").validate(data)
