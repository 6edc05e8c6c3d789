import time

from flask import Flask
from config import Config
from flask_sqlalchemy import SQLAlchemy
from flask_babel import Babel
from flask import current_app, request

db = SQLAlchemy()
babel = Babel()


def create_app(config_class=Config, **overrides):
    app = Flask(__name__)
    app.extensions['started_at'] = time.monotonic()
    settings = config_class(**overrides)
    app.config.from_mapping(settings.model_dump())
    app.config['DOMAIN_CONFIG'] = settings.domain_config()

    from uproom.utils.logging_config import configure_logging
    configure_logging(app)

    db.init_app(app)

    def get_locale():
        # 1. Explicit choice stored in a cookie
        lang = request.cookies.get("language")
        if lang and lang in app.config["LANGUAGES"]:
            current_app.logger.debug(
                f"Locale selector: found language in cookie: {lang}")
            return lang

        # 2. Fallback to browser's preferred language
        return request.accept_languages.best_match(app.config["LANGUAGES"])

    babel.init_app(app, locale_selector=get_locale)

    from uproom.services import SQLAlchemyCompanyStore, SubdomainService
    from uproom.utils.subdomain import reserved_set
    app.extensions['subdomain_service'] = SubdomainService(
        SQLAlchemyCompanyStore(),
        reserved=reserved_set(settings.reserved_subdomains_extra()),
    )

    from uproom.routes import register_blueprints
    register_blueprints(app)

    from uproom.commands import register_commands
    register_commands(app)

    from uproom import models

    app.logger.info(f"UpRoom subdomain service ready (env={settings.APP_ENV})")
    return app


def get_subdomain_service():
    """Return the SubdomainService bound to the current app."""
    return current_app.extensions['subdomain_service']
