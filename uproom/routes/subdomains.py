import re

from flask import Blueprint, current_app, g, jsonify, request

from uproom import get_subdomain_service
from uproom.utils.messages import (
    ERROR_COUNT_NOT_INTEGER, ERROR_COUNT_OUT_OF_RANGE,
    ERROR_INVALID_JSON, ERROR_NAME_REQUIRED
)
from uproom.utils.subdomain import build_url, extract_subdomain_from_host

bp = Blueprint("subdomains", __name__, url_prefix="/subdomains")

INTEGER_RE = re.compile(r"-?[0-9]+")


@bp.before_app_request
def resolve_request_subdomain():
    """Expose the tenant label of the request host as ``g.subdomain``."""
    hostname = request.host.split(':')[0]
    g.subdomain = extract_subdomain_from_host(hostname)


def _error(message, status=400):
    return jsonify({'error': str(message)}), status


def _parse_count(raw):
    """Return (count, error_response). A missing value uses the configured default."""
    max_count = current_app.config['SUBDOMAIN_ALTERNATIVES_MAX']
    if raw is None or raw == '':
        return current_app.config['SUBDOMAIN_ALTERNATIVES_COUNT'], None

    # JSON floats and booleans are not counts, even when int() would accept them
    if isinstance(raw, int) and not isinstance(raw, bool):
        count = raw
    elif isinstance(raw, str) and INTEGER_RE.fullmatch(raw.strip()):
        count = int(raw)
    else:
        return None, _error(ERROR_COUNT_NOT_INTEGER)

    if count < 0 or count > max_count:
        return None, _error(str(ERROR_COUNT_OUT_OF_RANGE) % {'max': max_count})
    return count, None


def _tenant_url(subdomain):
    protocol = 'https' if current_app.config['DOMAIN_CONFIG'].production else 'http'
    return build_url(subdomain, protocol, current_app.config['DOMAIN_CONFIG'])


@bp.route("/<candidate>/validate")
def validate(candidate):
    result = get_subdomain_service().validate_subdomain(candidate)
    return jsonify(result.to_dict())


@bp.route("/<base>/alternatives")
def alternatives(base):
    count, error = _parse_count(request.args.get('count'))
    if error:
        return error

    found = list(get_subdomain_service().generate_alternatives(base, count))
    return jsonify({'base': base, 'alternatives': found})


@bp.route("/suggest", methods=["POST"])
def suggest():
    """Turn a company name into a subdomain, with fallbacks when it is taken."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _error(ERROR_INVALID_JSON)

    name = payload.get('name')
    if not isinstance(name, str) or not name.strip():
        return _error(ERROR_NAME_REQUIRED)

    count, error = _parse_count(payload.get('count'))
    if error:
        return error

    suggestion = get_subdomain_service().suggest(name, count)
    data = suggestion.to_dict()
    data['url'] = _tenant_url(suggestion.subdomain) if suggestion.validation.is_usable else None
    return jsonify(data)


@bp.route("/current")
def current():
    subdomain = g.get('subdomain')
    return jsonify({
        'subdomain': subdomain,
        'url': _tenant_url(subdomain) if subdomain else None,
    })
