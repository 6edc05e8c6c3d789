import re
from typing import FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict

# System-critical names that can never be assigned to a company
RESERVED_SUBDOMAINS: FrozenSet[str] = frozenset({
    'www', 'api', 'admin', 'app', 'mail', 'ftp', 'blog', 'shop', 'store',
    'support', 'help', 'docs', 'dev', 'test', 'staging', 'prod', 'production',
    'dashboard', 'portal', 'login', 'register', 'auth', 'account', 'profile',
    'settings', 'config', 'status', 'health', 'ping', 'webhook', 'callback',
    'assets', 'static', 'cdn', 'media', 'images', 'files', 'uploads',
})

MIN_LENGTH = 3
MAX_LENGTH = 30

SUBDOMAIN_CHARSET_RE = re.compile(r'[a-z0-9-]+')
NON_ALNUM_RE = re.compile(r'[^a-z0-9]')
HYPHEN_RUN_RE = re.compile(r'-+')

LOOPBACK_HOSTS = ('localhost', '127.0.0.1')

MSG_TOO_SHORT = f'Subdomain must be at least {MIN_LENGTH} characters long'
MSG_TOO_LONG = f'Subdomain must be no more than {MAX_LENGTH} characters long'
MSG_BAD_CHARSET = 'Subdomain can only contain lowercase letters, numbers, and hyphens'
MSG_HYPHEN_EDGE = 'Subdomain cannot start or end with a hyphen'
MSG_HYPHEN_RUN = 'Subdomain cannot contain consecutive hyphens'
MSG_RESERVED = 'This subdomain is reserved and cannot be used'
MSG_VALID_FORMAT = 'Valid subdomain format'


class FormatCheck(BaseModel):
    """Outcome of the format rules for a single candidate."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: str


class DomainConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    production_domain: str = 'uproom.com'
    development_host: str = 'localhost:8080'
    production: bool = False

    @property
    def domain(self) -> str:
        return self.production_domain if self.production else self.development_host


def reserved_set(extra: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """Return the built-in reserved names, optionally extended with `extra`."""
    if not extra:
        return RESERVED_SUBDOMAINS
    return RESERVED_SUBDOMAINS | frozenset(name.lower() for name in extra)


def slugify_subdomain(value: str, max_length: int = MAX_LENGTH) -> str:
    """Derive a subdomain candidate from a free-text display name.

    - Lowercase
    - Replace every character outside [a-z0-9] with a hyphen
    - Collapse repeated hyphens
    - Remove leading/trailing hyphens
    - Truncate to max_length

    The result is not guaranteed to be valid: it can be empty, too short,
    reserved, or end with a hyphen left over by the truncation.
    """
    if not value:
        return ''

    value = value.lower()
    value = NON_ALNUM_RE.sub('-', value)
    value = HYPHEN_RUN_RE.sub('-', value)
    value = value.strip('-')
    return value[:max_length]


def validate_format(value: str, reserved: FrozenSet[str] = RESERVED_SUBDOMAINS) -> FormatCheck:
    """Check `value` against the naming rules.

    Rules are evaluated in a fixed order and the first failure is reported:
    minimum length, maximum length, character set, hyphen at either end,
    consecutive hyphens, reserved name.
    """
    if value is None:
        value = ''

    if len(value) < MIN_LENGTH:
        return FormatCheck(is_valid=False, message=MSG_TOO_SHORT)

    if len(value) > MAX_LENGTH:
        return FormatCheck(is_valid=False, message=MSG_TOO_LONG)

    if not SUBDOMAIN_CHARSET_RE.fullmatch(value):
        return FormatCheck(is_valid=False, message=MSG_BAD_CHARSET)

    if value.startswith('-') or value.endswith('-'):
        return FormatCheck(is_valid=False, message=MSG_HYPHEN_EDGE)

    if '--' in value:
        return FormatCheck(is_valid=False, message=MSG_HYPHEN_RUN)

    if value in reserved:
        return FormatCheck(is_valid=False, message=MSG_RESERVED)

    return FormatCheck(is_valid=True, message=MSG_VALID_FORMAT)


def is_valid_subdomain(value: str, reserved: FrozenSet[str] = RESERVED_SUBDOMAINS) -> bool:
    """Return True if value passes every format rule."""
    if not isinstance(value, str):
        return False
    return validate_format(value, reserved).is_valid


def build_url(subdomain: str, protocol: str = 'https', domain_config: Optional[DomainConfig] = None) -> str:
    """Compose the public URL of a tenant. No validation is performed."""
    if domain_config is None:
        domain_config = DomainConfig()
    return f'{protocol}://{subdomain}.{domain_config.domain}'


def extract_subdomain_from_host(hostname: str) -> Optional[str]:
    """Return the leftmost label of `hostname`, or None.

    Loopback hosts and hosts with fewer than three labels
    (``uproom.com``) carry no tenant subdomain.
    """
    if not hostname or hostname in LOOPBACK_HOSTS:
        return None

    parts = hostname.split('.')
    if len(parts) >= 3 and parts[0]:
        return parts[0]

    return None
