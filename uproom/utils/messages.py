"""
Standardized API messages.
Naming-policy messages live next to the rules in uproom.utils.subdomain.
"""

from flask_babel import lazy_gettext as _

ERROR_NAME_REQUIRED = _("A company name is required.")
ERROR_INVALID_JSON = _("Request body must be a JSON object.")
ERROR_COUNT_NOT_INTEGER = _("count must be an integer.")
ERROR_COUNT_OUT_OF_RANGE = _("count must be between 0 and %(max)s.")

HEALTH_OK = "ok"
HEALTH_ERROR = "error"
SERVICE_HEALTHY = "healthy"
SERVICE_UNHEALTHY = "unhealthy"
