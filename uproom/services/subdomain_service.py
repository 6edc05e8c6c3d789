"""
Subdomain availability and suggestion service.

Combines the naming rules from uproom.utils.subdomain with a record store
lookup:

1. Format rules (cheap, no I/O) reject malformed and reserved names
2. The store decides whether a well-formed name is already claimed
3. Alternatives re-run 1 and 2 for base-1, base-2, ... base-count

The result is advisory. A name reported as available is not reserved; the
caller's insert must still rely on the unique constraint on
``companies.subdomain`` and retry with an alternative on conflict.

Usage:
    service = SubdomainService(SQLAlchemyCompanyStore())
    result = service.validate_subdomain("acme")
    alternatives = list(service.generate_alternatives("acme"))
"""

from typing import FrozenSet, Iterator, List
import logging

from pydantic import BaseModel, ConfigDict, Field

from uproom.services.company_store import CompanyStore
from uproom.utils.errors import StoreUnavailableError
from uproom.utils.subdomain import (
    RESERVED_SUBDOMAINS,
    FormatCheck,
    slugify_subdomain,
    validate_format,
)

logger = logging.getLogger(__name__)

MSG_AVAILABLE = 'Subdomain is available'
MSG_TAKEN = 'Subdomain is already taken'

DEFAULT_ALTERNATIVES_COUNT = 5


class SubdomainValidation(BaseModel):
    """Combined format and availability report for one candidate."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_valid: bool = Field(alias='isValid')
    is_available: bool = Field(alias='isAvailable')
    message: str

    @property
    def is_usable(self) -> bool:
        return self.is_valid and self.is_available

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class SubdomainSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    subdomain: str
    validation: SubdomainValidation
    alternatives: List[str] = []

    def to_dict(self) -> dict:
        return {
            'subdomain': self.subdomain,
            'validation': self.validation.to_dict(),
            'alternatives': list(self.alternatives),
        }


class SubdomainService:
    """Validates subdomains and finds free alternatives."""

    def __init__(self, store: CompanyStore, reserved: FrozenSet[str] = RESERVED_SUBDOMAINS):
        self.store = store
        self.reserved = frozenset(reserved)

    def normalize(self, display_name: str) -> str:
        return slugify_subdomain(display_name)

    def validate_format(self, candidate: str) -> FormatCheck:
        return validate_format(candidate, self.reserved)

    def check_availability(self, subdomain: str) -> bool:
        """Return True only if the store positively reports no claim.

        Store faults count as unavailable so an outage can never hand out a
        name that is already in use.
        """
        try:
            record = self.store.find_by_subdomain(subdomain)
        except StoreUnavailableError as exc:
            logger.warning(
                f"SubdomainService: availability of '{subdomain}' unknown, store unavailable: {exc}")
            return False
        except Exception:
            logger.exception(f"SubdomainService: error checking availability of '{subdomain}'")
            return False

        if record is None:
            return True

        logger.debug(f"SubdomainService: '{subdomain}' is already claimed")
        return False

    def validate_subdomain(self, candidate: str) -> SubdomainValidation:
        """Check format first; only well-formed names reach the store."""
        format_check = self.validate_format(candidate)
        if not format_check.is_valid:
            return SubdomainValidation(
                is_valid=False,
                is_available=False,
                message=format_check.message,
            )

        is_available = self.check_availability(candidate)
        return SubdomainValidation(
            is_valid=True,
            is_available=is_available,
            message=MSG_AVAILABLE if is_available else MSG_TAKEN,
        )

    def generate_alternatives(self, base: str, count: int = DEFAULT_ALTERNATIVES_COUNT) -> Iterator[str]:
        """Yield usable names among base-1 .. base-count, in suffix order.

        Exactly `count` candidates are tried, one lookup at a time; nothing
        beyond them is searched, so the sequence may be empty.
        """
        for i in range(1, count + 1):
            candidate = f"{base}-{i}"
            if self.validate_subdomain(candidate).is_usable:
                yield candidate

    def suggest(self, display_name: str, count: int = DEFAULT_ALTERNATIVES_COUNT) -> SubdomainSuggestion:
        """Normalize a company name and report whether it can be used.

        Alternatives are only searched when the normalized name itself is
        not usable.
        """
        candidate = self.normalize(display_name)
        validation = self.validate_subdomain(candidate)

        alternatives = []
        if not validation.is_usable:
            alternatives = list(self.generate_alternatives(candidate, count))
            logger.info(
                f"SubdomainService: '{candidate}' not usable ({validation.message}), "
                f"{len(alternatives)} alternative(s) found")

        return SubdomainSuggestion(
            subdomain=candidate,
            validation=validation,
            alternatives=alternatives,
        )
