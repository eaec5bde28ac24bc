import logging
import os

from dotenv import load_dotenv

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()

from flask import Flask  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from werkzeug.exceptions import HTTPException  # noqa: E402

from healthcare.core import config  # noqa: E402
from healthcare.core.api_utils import api_response  # noqa: E402
from healthcare.core.exceptions import EntityNotFoundError  # noqa: E402
from healthcare.core.limiter_config import limiter  # noqa: E402
from healthcare.core.logging_config import setup_logging  # noqa: E402
from healthcare.core.validation import ValidationError  # noqa: E402
from healthcare.db.session import create_tables  # noqa: E402

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        errors = [f"{e.field}: {e.message}"] if e.field else [e.message]
        return api_response(False, e.message, {"errors": errors}, 400)

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(e: EntityNotFoundError):
        return api_response(False, str(e), None, 404)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        return api_response(False, e.description or e.name, None, e.code or 500)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_failure(e: SQLAlchemyError):
        logger.error(
            "Store operation failed",
            extra={"context": {"error_type": type(e).__name__}},
            exc_info=True,
        )
        return api_response(False, "Internal server error", None, 500)


def _register_blueprints(app: Flask) -> None:
    from healthcare.controllers.appointment_controller import appointment_bp
    from healthcare.controllers.doctor_controller import doctor_bp
    from healthcare.controllers.health_controller import health_bp
    from healthcare.controllers.patient_controller import patient_bp

    app.register_blueprint(doctor_bp)
    app.register_blueprint(patient_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(health_bp)


def create_app() -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False

    setup_logging(
        app,
        log_level=config.get_log_level(),
        enable_sql_echo=config.get_log_sql(),
        log_to_file=config.get_log_to_file() and not config.is_testing(),
        use_json_format=config.get_log_json(),
    )
    config.log_app_config()

    app.config["RATELIMIT_ENABLED"] = config.get_rate_limit_enabled()
    app.config["RATELIMIT_STORAGE_URI"] = config.get_limiter_storage_uri()
    limiter.init_app(app)

    _register_error_handlers(app)
    _register_blueprints(app)

    create_tables()
    logger.info(
        "Application created",
        extra={"context": {"blueprints": list(app.blueprints)}},
    )
    return app


if __name__ == "__main__":
    create_app().run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
        debug=os.getenv("FLASK_DEBUG", "0") == "1",
    )
