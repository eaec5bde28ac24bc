"""
Common API utilities for consistent response formatting across all controllers.
"""

from typing import Any, Dict, Optional, Tuple

from flask import jsonify, request

from healthcare.core.validation import ValidationError


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API response format for all endpoints.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def validation_error_response(errors) -> Tuple[Any, int]:
    """400 response carrying every violated constraint."""
    return api_response(False, "Validation failed", {"errors": list(errors)}, 400)


def not_found_response(message: str) -> Tuple[Any, int]:
    return api_response(False, message, None, 404)


def get_json_payload() -> Dict[str, Any]:
    """
    Return the request body as a dict.

    Raises:
        ValidationError: when the body is missing, malformed or not an object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
