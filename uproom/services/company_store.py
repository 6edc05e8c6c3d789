"""
Record store adapters for subdomain lookups.

The availability check needs exactly one capability from the store: find a
company by exact subdomain. Anything that implements `find_by_subdomain`
can back a SubdomainService.
"""

from typing import Any, Optional, Protocol
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from uproom.utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class CompanyStore(Protocol):
    def find_by_subdomain(self, subdomain: str) -> Optional[Any]:
        """Return the record claiming `subdomain`, or None.

        Raises on infrastructure faults.
        """
        ...


class SQLAlchemyCompanyStore:
    """Looks companies up through the Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        # Defaults to the request-scoped session; resolved per call so the
        # store can be built before an app context exists.
        self._session = session

    @property
    def session(self):
        if self._session is not None:
            return self._session
        from uproom import db
        return db.session

    def find_by_subdomain(self, subdomain: str) -> Optional[Any]:
        from uproom.models import Company

        try:
            return self.session.execute(
                select(Company).filter_by(subdomain=subdomain).limit(1)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.debug(f"SQLAlchemyCompanyStore: lookup failed for '{subdomain}': {exc}")
            self._rollback()
            raise StoreUnavailableError(
                f"Company lookup failed for subdomain '{subdomain}'", subdomain=subdomain
            ) from exc

    def _rollback(self):
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.exception("SQLAlchemyCompanyStore: rollback after failed lookup also failed")
