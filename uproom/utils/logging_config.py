"""
Application logging setup.

Production writes one JSON object per line (python-json-logger) so the
platform's log shipper can index fields; development keeps a readable format.
"""

import logging
from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'
PLAIN_FORMAT = '[%(asctime)s] %(levelname)s in %(name)s: %(message)s'

_HANDLER_NAME = 'uproom'


def build_formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return JsonFormatter(LOG_FORMAT, rename_fields={'levelname': 'level'})
    return logging.Formatter(PLAIN_FORMAT)


def configure_logging(app):
    """Attach a single stream handler to the root logger.

    Calling this again (e.g. one app per test) replaces the handler instead
    of stacking duplicates.
    """
    level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO)
    json_output = bool(app.config.get('LOG_JSON'))

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(build_formatter(json_output))
    root.addHandler(handler)
    root.setLevel(level)

    app.logger.debug(f"Logging configured: level={logging.getLevelName(level)} json={json_output}")
    return handler
