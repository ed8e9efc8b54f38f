"""
Identity package for guest_roster.

Exports resolver helpers only; the creation ledger is imported from
``guest_roster.identity.idempotency`` directly to avoid circular imports.
"""

from .resolver import (
    IdentityKey,
    IdentityKind,
    display_name_key,
    normalize_text,
    resolve,
)

__all__ = [
    "IdentityKey",
    "IdentityKind",
    "display_name_key",
    "normalize_text",
    "resolve",
]
