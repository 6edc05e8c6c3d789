"""
Subdomain services.

Availability checks and alternative-name search over a pluggable record store.
"""

from uproom.services.company_store import CompanyStore, SQLAlchemyCompanyStore
from uproom.services.subdomain_service import (
    SubdomainService,
    SubdomainSuggestion,
    SubdomainValidation,
)

__all__ = [
    'CompanyStore',
    'SQLAlchemyCompanyStore',
    'SubdomainService',
    'SubdomainSuggestion',
    'SubdomainValidation',
]
