"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, jsonify

from healthcare.db.session import test_database_connection

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"])
def health_check():
    """
    Report whether the store answers a trivial query.

    Status codes:
        200: store reachable
        503: store unreachable
    """
    if test_database_connection():
        return jsonify({"status": "healthy", "database": "ok"}), 200

    logger.warning("Health check failed: database unreachable")
    return jsonify({"status": "unhealthy", "database": "unreachable"}), 503
