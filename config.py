import json
import os
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import model_validator, field_validator
from typing import Annotated, List, Optional

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DEFAULT_DB_URI = f'sqlite:///{os.path.join(BASE_DIR, "uproom.db")}'


def parse_name_list(value) -> List[str]:
    """Turn a JSON list or a comma-separated string into lowercase, non-empty names."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.strip()
        value = json.loads(value) if value.startswith('[') else value.split(',')
    return [str(part).strip().lower() for part in value if str(part).strip()]


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',  # Ignore extra fields from .env
    )

    # Security configuration
    SECRET_KEY: str

    # Database
    DATABASE_URL: str = DEFAULT_DB_URI
    SQLALCHEMY_DATABASE_URI: Optional[str] = None
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_ENGINE_OPTIONS: dict = {}

    # Application environment: development | staging | production
    APP_ENV: str = os.getenv('FLASK_ENV', 'development')

    # Tenant URLs are built as <subdomain>.<PRODUCTION_DOMAIN> in production
    # and <subdomain>.<DEVELOPMENT_HOST> everywhere else.
    PRODUCTION_DOMAIN: str = 'uproom.com'
    DEVELOPMENT_HOST: str = 'localhost:8080'

    # Alternative-name search
    SUBDOMAIN_ALTERNATIVES_COUNT: int = 5
    SUBDOMAIN_ALTERNATIVES_MAX: int = 50

    # Names reserved on top of the built-in list. From the environment either
    # "billing,metrics" or '["billing", "metrics"]'.
    RESERVED_SUBDOMAINS_EXTRA: Annotated[List[str], NoDecode] = []

    # Internationalization
    LANGUAGES: list = ['en', 'pt']
    BABEL_DEFAULT_LOCALE: str = 'en'
    BABEL_DEFAULT_TIMEZONE: str = 'UTC'

    # Logging. LOG_JSON defaults to on in production.
    LOG_LEVEL: str = 'INFO'
    LOG_JSON: Optional[bool] = None

    @field_validator('DATABASE_URL', mode='before')
    def _normalize_database_url(cls, v):
        """Hosted Postgres providers still hand out ``postgres://`` URLs,
        which SQLAlchemy no longer accepts."""
        if isinstance(v, str) and v.startswith('postgres://'):
            return 'postgresql://' + v[len('postgres://'):]
        return v

    @field_validator('RESERVED_SUBDOMAINS_EXTRA', mode='before')
    def _parse_reserved_extra(cls, v):
        return parse_name_list(v)

    @field_validator('PRODUCTION_DOMAIN', 'DEVELOPMENT_HOST', mode='before')
    def _check_bare_host(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if '://' in v or '/' in v:
                raise ValueError('must be a bare host name, without scheme or path')
            if not v:
                raise ValueError('must not be empty')
        return v

    @model_validator(mode='after')
    def set_database_config(self) -> 'Config':
        """Set SQLALCHEMY_DATABASE_URI from DATABASE_URL and configure engine options"""
        self.SQLALCHEMY_DATABASE_URI = self.DATABASE_URL

        if self.DATABASE_URL.startswith('postgresql') or 'mysql' in self.DATABASE_URL:
            self.SQLALCHEMY_ENGINE_OPTIONS = {
                'pool_size': 10,
                'pool_recycle': 3600,
                'pool_pre_ping': True,
                'max_overflow': 20,
            }

        return self

    @model_validator(mode='after')
    def set_logging_defaults(self) -> 'Config':
        if self.LOG_JSON is None:
            self.LOG_JSON = self.is_production
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        return self

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == 'production'

    def reserved_subdomains_extra(self) -> List[str]:
        return list(self.RESERVED_SUBDOMAINS_EXTRA)

    def domain_config(self):
        from uproom.utils.subdomain import DomainConfig
        return DomainConfig(
            production_domain=self.PRODUCTION_DOMAIN,
            development_host=self.DEVELOPMENT_HOST,
            production=self.is_production,
        )
