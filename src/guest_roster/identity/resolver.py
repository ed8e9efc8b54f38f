# src/guest_roster/identity/resolver.py
"""
Identity resolution for guest records.

A guest is identified by the first usable option, strongest first:

    DOCUMENT        document number
    NAME_AND_BIRTH  first/last name plus date of birth
    NAME            display name
    FALLBACK        record id

Every component is whitespace-collapsed and lower-cased before it becomes part
of a key, so "Jane  DOE" and "jane doe" resolve identically.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from guest_roster.models import GuestRecord


class IdentityKind(str, Enum):
    DOCUMENT = "DOC"
    NAME_AND_BIRTH = "NDO"
    NAME = "NAME"
    FALLBACK = "ID"


def normalize_text(value: Any) -> str:
    if value is None:
        return ""
    return " ".join(str(value).split()).lower()


def _stable_hash(key: str) -> str:
    # SHA1 is fine for identity fingerprints (not security).
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class IdentityKey:
    kind: IdentityKind
    parts: Tuple[str, ...]

    @property
    def token(self) -> str:
        return f"{self.kind.value}:{'|'.join(self.parts)}"

    @property
    def fingerprint(self) -> str:
        return _stable_hash(self.token)

    def __str__(self) -> str:
        return self.token


def resolve(record: GuestRecord) -> IdentityKey:
    details = record.details

    doc = normalize_text(details.document_number)
    if doc:
        return IdentityKey(IdentityKind.DOCUMENT, (doc,))

    first = normalize_text(details.first_name)
    last = normalize_text(details.last_name)
    dob = normalize_text(details.date_of_birth)
    if (first or last) and dob:
        return IdentityKey(IdentityKind.NAME_AND_BIRTH, (first, last, dob))

    name = normalize_text(record.name)
    if name:
        return IdentityKey(IdentityKind.NAME, (name,))

    return IdentityKey(IdentityKind.FALLBACK, (normalize_text(record.id),))


def display_name_key(record: GuestRecord) -> Optional[str]:
    """Normalized display name, or None when the record has none."""
    return normalize_text(record.name) or None


__all__ = [
    "IdentityKind",
    "IdentityKey",
    "display_name_key",
    "normalize_text",
    "resolve",
]
