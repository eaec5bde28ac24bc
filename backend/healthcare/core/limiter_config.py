from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from healthcare.core.config import get_limiter_storage_uri

# Global Limiter instance to be imported by controllers.
# create_app() sets RATELIMIT_ENABLED on the app config before init_app.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per hour", "50 per minute"],
    storage_uri=get_limiter_storage_uri(),
)
