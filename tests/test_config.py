import pytest
from pydantic import ValidationError

from config import Config, parse_name_list


def make_config(**kwargs):
    kwargs.setdefault('SECRET_KEY', 'test-secret')
    return Config(**kwargs)


def test_database_uri_follows_database_url():
    cfg = make_config(DATABASE_URL='sqlite:///:memory:')
    assert cfg.SQLALCHEMY_DATABASE_URI == 'sqlite:///:memory:'
    assert cfg.SQLALCHEMY_ENGINE_OPTIONS == {}


def test_postgres_scheme_is_rewritten_and_pooled():
    cfg = make_config(DATABASE_URL='postgres://u:p@db.example.com:5432/uproom')
    assert cfg.SQLALCHEMY_DATABASE_URI == 'postgresql://u:p@db.example.com:5432/uproom'
    assert cfg.SQLALCHEMY_ENGINE_OPTIONS['pool_pre_ping'] is True


def test_domain_config_depends_on_environment():
    dev = make_config(APP_ENV='development').domain_config()
    assert not dev.production
    assert dev.domain == 'localhost:8080'

    prod = make_config(APP_ENV='production', PRODUCTION_DOMAIN='Example.org').domain_config()
    assert prod.production
    assert prod.domain == 'example.org'


@pytest.mark.parametrize('value', ['https://uproom.com', 'uproom.com/app', ''])
def test_production_domain_must_be_bare_host(value):
    with pytest.raises(ValidationError):
        make_config(PRODUCTION_DOMAIN=value)


def test_log_json_defaults_to_production():
    assert make_config(APP_ENV='production').LOG_JSON is True
    assert make_config(APP_ENV='development').LOG_JSON is False
    assert make_config(APP_ENV='development', LOG_JSON=True).LOG_JSON is True
    assert make_config(LOG_LEVEL='debug').LOG_LEVEL == 'DEBUG'


def test_reserved_extra_parsing():
    assert parse_name_list('') == []
    assert parse_name_list(' Billing , metrics,,') == ['billing', 'metrics']
    cfg = make_config(RESERVED_SUBDOMAINS_EXTRA='billing,metrics')
    assert cfg.reserved_subdomains_extra() == ['billing', 'metrics']


def test_reserved_extra_accepts_lists():
    assert make_config(RESERVED_SUBDOMAINS_EXTRA=['Billing']).RESERVED_SUBDOMAINS_EXTRA == ['billing']
    assert parse_name_list('["billing", "Metrics"]') == ['billing', 'metrics']


@pytest.mark.parametrize('raw', ['billing,metrics', '["billing", "metrics"]'])
def test_reserved_extra_from_environment(monkeypatch, raw):
    monkeypatch.setenv('RESERVED_SUBDOMAINS_EXTRA', raw)
    assert make_config().RESERVED_SUBDOMAINS_EXTRA == ['billing', 'metrics']


def test_reserved_extra_rejects_broken_json(monkeypatch):
    monkeypatch.setenv('RESERVED_SUBDOMAINS_EXTRA', '["billing"')
    with pytest.raises(ValidationError):
        make_config()


def test_reserved_extra_reaches_app(monkeypatch):
    monkeypatch.setenv('SECRET_KEY', 'test-secret')
    from uproom import create_app
    app = create_app(DATABASE_URL='sqlite:///:memory:', RESERVED_SUBDOMAINS_EXTRA='billing')
    service = app.extensions['subdomain_service']
    assert 'billing' in service.reserved
    assert service.validate_format('billing').message == 'This subdomain is reserved and cannot be used'

    app = create_app(DATABASE_URL='sqlite:///:memory:', RESERVED_SUBDOMAINS_EXTRA=['billing', 'Metrics'])
    assert {'billing', 'metrics'} <= app.extensions['subdomain_service'].reserved


def test_secret_key_required(monkeypatch):
    monkeypatch.delenv('SECRET_KEY', raising=False)
    with pytest.raises(ValidationError):
        Config(_env_file=None)
