"""
Local roster edits.

Every function is pure: it returns a new list and leaves its input alone.
Callers persist the result (see ``guest_roster.core.session``).
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Iterable, List, Optional

from guest_roster.config import get_config
from guest_roster.identity.resolver import normalize_text
from guest_roster.logger import get_logger
from guest_roster.models import GuestDetails, GuestRecord, is_blank

log = get_logger("roster_ops")


def new_guest_id() -> str:
    return f"local-{uuid.uuid4().hex}"


def _display_name(details: GuestDetails, fallback: str) -> str:
    first = (details.first_name or "").strip()
    last = (details.last_name or "").strip()
    if first or last:
        return " ".join(p for p in (first, last) if p)
    return fallback


def _room_matches(guest: GuestRecord, booking_room_id: Optional[object]) -> bool:
    if booking_room_id is None:
        return True
    return guest.booking_room_id == str(booking_room_id)


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------

def delete_selected(guests: Iterable[GuestRecord], selected_ids: Iterable[str]) -> List[GuestRecord]:
    """Drop selected guests; the main guest is never removed."""
    selected = {str(i) for i in selected_ids}
    out = [g for g in guests if g.is_main or g.id not in selected]
    return out


def update_details(guests: Iterable[GuestRecord], guest_id: str, details: GuestDetails) -> List[GuestRecord]:
    out = []
    for g in guests:
        if g.id == guest_id:
            g = replace(g, details=replace(details), name=_display_name(details, g.name))
        out.append(g)
    return out


def apply_face_capture(guests: Iterable[GuestRecord], guest_id: str, image: str) -> List[GuestRecord]:
    return [replace(g, face_image=image) if g.id == guest_id else g for g in guests]


def apply_document_capture(
    guests: Iterable[GuestRecord],
    guest_id: str,
    image: str,
    extracted: Optional[GuestDetails] = None,
) -> List[GuestRecord]:
    """Attach a document image and overlay OCR-extracted fields."""
    out = []
    for g in guests:
        if g.id == guest_id:
            details = g.details.overlay(extracted) if extracted else replace(g.details)
            g = replace(
                g,
                document_image=image,
                details=details,
                name=_display_name(details, g.name),
            )
        out.append(g)
    return out


def room_guest_count(guests: Iterable[GuestRecord], booking_room_id: Optional[object] = None) -> int:
    return sum(1 for g in guests if _room_matches(g, booking_room_id))


def can_add_guest(
    guests: Iterable[GuestRecord],
    booking_room_id: Optional[object] = None,
    max_guests: Optional[int] = None,
) -> bool:
    limit = max_guests if max_guests is not None else get_config().max_guests_per_room
    return room_guest_count(guests, booking_room_id) < limit


def add_guest(
    guests: Iterable[GuestRecord],
    booking_room_id: Optional[object] = None,
    max_guests: Optional[int] = None,
) -> List[GuestRecord]:
    """Append a blank local guest, unless the room is already full."""
    current = list(guests)
    if not can_add_guest(current, booking_room_id, max_guests):
        log.warning("Room %s is full; not adding a guest", booking_room_id)
        return current

    guest = GuestRecord(
        id=new_guest_id(),
        name=f"Guest {len(current) + 1}",
        is_main_guest=False,
        progress=0,
        booking_room_id=None if booking_room_id is None else str(booking_room_id),
    )
    return current + [guest]


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def is_meaningful(guest: GuestRecord) -> bool:
    """True once the guest carries anything beyond a placeholder name."""
    if (guest.progress or 0) > 0:
        return True
    if not is_blank(guest.face_image) or not is_blank(guest.document_image):
        return True
    return bool(guest.details.filled_fields())


def filter_meaningful(guests: Iterable[GuestRecord]) -> List[GuestRecord]:
    return [g for g in guests if is_meaningful(g)]


def filter_by_room(guests: Iterable[GuestRecord], booking_room_id: Optional[object]) -> List[GuestRecord]:
    """Narrow to one room, but only when room tags exist and something matches."""
    current = list(guests)
    if booking_room_id is None or not any(g.booking_room_id for g in current):
        return current
    matching = [g for g in current if _room_matches(g, booking_room_id)]
    return matching or current


def align_main_guest(guests: Iterable[GuestRecord], main_guest_name: Optional[str]) -> List[GuestRecord]:
    """Mark the guest named on the booking as main, if one matches."""
    current = list(guests)
    target = normalize_text(main_guest_name)
    if not target or not any(normalize_text(g.name) == target for g in current):
        return current
    return [replace(g, is_main_guest=normalize_text(g.name) == target) for g in current]


def strip_sensitive_data(guests: Iterable[GuestRecord]) -> List[GuestRecord]:
    return [
        replace(
            g,
            details=GuestDetails(),
            face_image=None,
            document_image=None,
            progress=0,
            name=g.name if g.name.strip() else f"Guest {idx + 1}",
        )
        for idx, g in enumerate(guests)
    ]
