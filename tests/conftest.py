import os
import pytest
from uproom import create_app, db
from uproom.models import Company
from uproom.services import SubdomainService


class FakeCompanyStore:
    """In-memory stand-in for the companies table.

    Records every lookup so tests can assert which candidates reached the
    store, and raises `error` on every lookup when one is given.
    """

    def __init__(self, taken=(), error=None):
        self.taken = set(taken)
        self.error = error
        self.lookups = []

    def find_by_subdomain(self, subdomain):
        self.lookups.append(subdomain)
        if self.error is not None:
            raise self.error
        if subdomain in self.taken:
            return {'subdomain': subdomain}
        return None


@pytest.fixture
def make_service():
    """Build a SubdomainService over a FakeCompanyStore."""
    def _make(taken=(), error=None, **kwargs):
        store = FakeCompanyStore(taken=taken, error=error)
        return SubdomainService(store, **kwargs), store
    return _make


@pytest.fixture
def app():
    """Create and configure a test app."""
    os.environ.setdefault('SECRET_KEY', 'test-secret')
    app = create_app(
        DATABASE_URL='sqlite:///:memory:',
        APP_ENV='testing',
    )
    app.config['TESTING'] = True

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """A test runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def acme(app):
    """A company that already owns the 'acme' subdomain."""
    company = Company(name='Acme Corp', subdomain='acme')
    db.session.add(company)
    db.session.commit()
    return company


@pytest.fixture
def use_store(app):
    """Swap the app's store for a FakeCompanyStore."""
    def _use(taken=(), error=None):
        store = FakeCompanyStore(taken=taken, error=error)
        app.extensions['subdomain_service'] = SubdomainService(store)
        return store
    return _use
