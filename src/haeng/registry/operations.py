"""Add, remove, list and look up playlists in the registry."""

from __future__ import annotations

import ipaddress
import logging
import re
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from haeng.core.errors import (
    AlreadyExistsError,
    DomainNotAllowedError,
    InvalidNameError,
    InvalidUrlError,
    NoDomainError,
    NotFoundError,
)
from haeng.ui import print_info, print_success

if TYPE_CHECKING:
    from haeng.registry.store import Registry, RegistryStore

logger = logging.getLogger(__name__)

# Hosts accepted for playlist URLs
ALLOWED_DOMAINS = frozenset({"youtube.com", "www.youtube.com"})

# Schemes whose URLs always carry a host, even when written without slashes
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

# C0 controls and space, trimmed from both ends of a URL
_C0_AND_SPACE = "".join(chr(code) for code in range(0x21))

_TAB_OR_NEWLINE_RE = re.compile(r"[\t\n\r]")


def _domain_of(host: str | None) -> str | None:
    """Return the host if it is a domain name, None for IP literals."""
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def _normalize_url(url: str) -> str:
    """Clean up a URL the way browsers do before parsing it.

    Surrounding controls and spaces are trimmed, tabs and newlines are
    dropped, and special schemes written as ``https:host/path`` get their
    ``//`` back.
    """
    url = _TAB_OR_NEWLINE_RE.sub("", url.strip(_C0_AND_SPACE))
    scheme, sep, rest = url.partition(":")
    if sep and scheme.lower() in _SPECIAL_SCHEMES:
        url = f"{scheme}://" + rest.lstrip("/\\")
    return url


def validate_url(url: str) -> str:
    """Check that a URL is well formed and points at an allowed domain.

    Args:
        url: The playlist URL to check.

    Returns:
        The normalized URL.

    Raises:
        InvalidUrlError: If the URL cannot be parsed or has no scheme.
        NoDomainError: If the URL has no domain name.
        DomainNotAllowedError: If the domain is not in ALLOWED_DOMAINS.
    """
    normalized = _normalize_url(url)
    if not normalized:
        raise InvalidUrlError(url)

    try:
        parsed = urlparse(normalized)
        host = parsed.hostname
    except ValueError as e:
        raise InvalidUrlError(url) from e

    if not parsed.scheme or (host and any(ch.isspace() for ch in host)):
        raise InvalidUrlError(url)

    domain = _domain_of(host)
    if domain is None:
        raise NoDomainError(url)

    if domain not in ALLOWED_DOMAINS:
        raise DomainNotAllowedError(url, domain)

    return normalized


def add(store: RegistryStore, registry: Registry, name: str, url: str) -> None:
    """Validate and register a playlist, then save the registry.

    Args:
        store: Storage the registry is saved to.
        registry: The in-memory registry to insert into.
        name: Unique playlist name.
        url: Playlist URL on an allowed domain.

    Raises:
        InvalidUrlError: If the URL cannot be parsed.
        NoDomainError: If the URL has no domain name.
        DomainNotAllowedError: If the URL is not on an allowed domain.
        InvalidNameError: If the name is empty.
        AlreadyExistsError: If the name is already registered.
        FileWriteError: If the registry cannot be saved.
    """
    url = validate_url(url)

    if not name:
        raise InvalidNameError()
    if name in registry:
        raise AlreadyExistsError(name)

    registry[name] = url
    store.persist(registry)

    logger.debug("Registered %s -> %s", name, url)
    print_success(f"Added `{name}` ({url})")


def remove(store: RegistryStore, registry: Registry, name: str) -> bool:
    """Remove a playlist if present and save the registry either way.

    Returns:
        True if the playlist was registered, False otherwise.

    Raises:
        FileWriteError: If the registry cannot be saved.
    """
    url = registry.pop(name, None)

    if url is None:
        print_info(f"`{name}` was not present in the list")
    else:
        print_success(f"Successfully removed `{name}` ({url})")

    store.persist(registry)
    return url is not None


def list_playlists(registry: Registry) -> list[tuple[str, str]]:
    """Return every (name, url) pair, ordered by name."""
    return sorted(registry.items())


def resolve_url(registry: Registry, name: str) -> str:
    """Look up the URL registered under a name.

    Raises:
        NotFoundError: If the name is not registered.
    """
    try:
        return registry[name]
    except KeyError:
        raise NotFoundError(name) from None
