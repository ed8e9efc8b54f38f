"""
Creation ledger: idempotency keys for "guest already created" markers.

Keys are derived through the identity resolver so that the guest the merge
engine treats as one person is also created on the backend only once:

    created_guest:<booking_id>:<identity token>
"""

from __future__ import annotations

import json
from typing import Iterable, Optional, Set

from guest_roster.cache.storage import KeyValueStorage
from guest_roster.identity.resolver import resolve
from guest_roster.logger import get_logger
from guest_roster.models import GuestRecord

log = get_logger("idempotency")


def creation_key(booking_id: object, record: GuestRecord) -> str:
    return f"created_guest:{booking_id}:{resolve(record).token}"


class CreationLedger:
    def __init__(
        self,
        booking_id: object,
        storage: Optional[KeyValueStorage] = None,
        keys: Iterable[str] = (),
    ):
        self.booking_id = str(booking_id)
        self.storage = storage
        self._keys: Set[str] = set(keys)
        if storage is not None:
            self._keys |= self._load()

    @property
    def storage_key(self) -> str:
        return f"created_guests_{self.booking_id}"

    def key_for(self, record: GuestRecord) -> str:
        return creation_key(self.booking_id, record)

    def was_created(self, record: GuestRecord) -> bool:
        return self.key_for(record) in self._keys

    def mark_created(self, record: GuestRecord) -> str:
        key = self.key_for(record)
        if key not in self._keys:
            self._keys.add(key)
            self._save()
        return key

    def pending(self, guests: Iterable[GuestRecord]) -> list:
        """Guests that have not been created yet, in input order."""
        return [g for g in guests if not self.was_created(g)]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    def _load(self) -> Set[str]:
        raw = self.storage.get_item(self.storage_key) if self.storage else None
        if not raw:
            return set()
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            log.warning("Ignoring corrupt creation ledger for booking %s", self.booking_id)
            return set()
        if not isinstance(data, list):
            return set()
        return {str(k) for k in data}

    def _save(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set_item(self.storage_key, json.dumps(sorted(self._keys)))
        except OSError:
            log.warning("Failed to persist creation ledger for booking %s", self.booking_id, exc_info=True)
