"""
Merge a backend roster with the locally cached roster.

The backend is the authoritative set of who exists; the cache is the latest
user intent. Records are matched by identity key and the cache is overlaid on
the backend field by field, so an unsynced local edit survives a refetch.
Empty values never overwrite populated ones.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from guest_roster.identity.resolver import resolve
from guest_roster.logging import get_logger
from guest_roster.models import GuestRecord, is_blank
from guest_roster.reconcile._inputs import coerce_roster, main_guest_first

log = get_logger("merge")


def _pick(cache_value: Optional[Any], backend_value: Optional[Any]) -> Optional[Any]:
    return backend_value if is_blank(cache_value) else cache_value


def overlay(base: Optional[GuestRecord], cached: GuestRecord) -> GuestRecord:
    """Overlay ``cached`` onto ``base`` (which may be absent)."""
    if base is None:
        return cached.copy()

    return GuestRecord(
        id=base.id,
        name=_pick(cached.name, base.name) or "",
        is_main_guest=(
            cached.is_main_guest
            if isinstance(cached.is_main_guest, bool)
            else base.is_main_guest
        ),
        document_type=cached.document_type or base.document_type,
        details=base.details.overlay(cached.details),
        face_image=_pick(cached.face_image, base.face_image),
        document_image=_pick(cached.document_image, base.document_image),
        progress=cached.progress if cached.progress is not None else base.progress,
        booking_room_id=_pick(cached.booking_room_id, base.booking_room_id),
    )


def _settle(merged: Dict[str, GuestRecord], key: str, record: GuestRecord) -> None:
    """Store ``record`` under its own identity key.

    An overlay can strengthen a record's identity (e.g. a cached first name
    next to a backend date of birth). When the new key is already taken the
    two entries are folded together, so no two values share a key.
    """
    while True:
        new_key = resolve(record).token
        if new_key == key:
            merged[key] = record
            return
        merged.pop(key, None)
        existing = merged.get(new_key)
        if existing is None:
            merged[new_key] = record
            return
        log.debug("Overlay moved %s onto existing identity %s", key, new_key)
        record = overlay(existing, record)
        key = new_key


def merge(backend_list: Any, cache_list: Any) -> List[GuestRecord]:
    """Reconcile ``backend_list`` with ``cache_list``; the cache wins per field.

    ``None`` or non-list inputs are treated as empty rosters.
    """
    backend = coerce_roster(backend_list, "backend")
    cached = coerce_roster(cache_list, "cache")

    merged: Dict[str, GuestRecord] = {}
    for record in backend:
        merged[resolve(record).token] = record.copy()

    introduced = 0
    for record in cached:
        key = resolve(record).token
        base = merged.get(key)
        if base is None:
            introduced += 1
        _settle(merged, key, overlay(base, record))

    out = main_guest_first(list(merged.values()))
    log.debug(
        "Merged %d backend + %d cached guest(s) into %d (%d cache-only)",
        len(backend),
        len(cached),
        len(out),
        introduced,
    )
    return out
