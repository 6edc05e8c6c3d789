import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from uproom import db
from uproom.utils.messages import HEALTH_ERROR, HEALTH_OK, SERVICE_HEALTHY, SERVICE_UNHEALTHY

logger = logging.getLogger(__name__)

bp = Blueprint("health", __name__)


def check_database_health() -> bool:
    try:
        db.session.execute(text('SELECT 1'))
        return True
    except SQLAlchemyError:
        logger.exception("Health check: database is not reachable")
        db.session.rollback()
        return False


@bp.route("/health")
def health():
    database_ok = check_database_health()
    body = {
        'status': HEALTH_OK if database_ok else HEALTH_ERROR,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'services': {
            'database': SERVICE_HEALTHY if database_ok else SERVICE_UNHEALTHY,
            'api': SERVICE_HEALTHY,
        },
        'uptime': round(time.monotonic() - current_app.extensions['started_at'], 3),
    }
    return jsonify(body), 200 if database_ok else 503
