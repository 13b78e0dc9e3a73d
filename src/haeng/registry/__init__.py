"""Registry feature - persisted playlist name to URL mapping."""

from haeng.registry.operations import (
    ALLOWED_DOMAINS,
    add,
    list_playlists,
    remove,
    resolve_url,
    validate_url,
)
from haeng.registry.store import Registry, RegistryStore

__all__ = [
    "ALLOWED_DOMAINS",
    "Registry",
    "RegistryStore",
    "add",
    "list_playlists",
    "remove",
    "resolve_url",
    "validate_url",
]
