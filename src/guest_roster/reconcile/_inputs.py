from __future__ import annotations

from typing import Any, List

from guest_roster.core.exceptions import InvalidGuestRecordError
from guest_roster.logging import get_logger
from guest_roster.models import GuestRecord

log = get_logger("reconcile")


def coerce_roster(value: Any, label: str) -> List[GuestRecord]:
    """Accept a list of GuestRecord (or decodable dicts); anything else is empty."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        log.warning("%s roster is %s, not a list; treating as empty", label, type(value).__name__)
        return []

    out: List[GuestRecord] = []
    for idx, item in enumerate(value):
        if isinstance(item, GuestRecord):
            out.append(item)
            continue
        try:
            out.append(GuestRecord.from_dict(item))
        except InvalidGuestRecordError as exc:
            log.warning("Skipping %s roster item %d: %s", label, idx, exc)
    return out


def main_guest_first(records: List[GuestRecord]) -> List[GuestRecord]:
    # sorted() is stable, so equal ranks keep their input order
    return sorted(records, key=lambda g: 0 if g.is_main else 1)
