from uproom.utils.subdomain import (
    RESERVED_SUBDOMAINS,
    build_url,
    extract_subdomain_from_host,
    is_valid_subdomain,
    slugify_subdomain,
    validate_format,
)

__all__ = [
    'RESERVED_SUBDOMAINS',
    'build_url',
    'extract_subdomain_from_host',
    'is_valid_subdomain',
    'slugify_subdomain',
    'validate_format',
]
