"""
Backend roster normalization.

The guest-fetch endpoints return loosely typed records whose field names mix
camelCase and snake_case. ``map_backend_guests`` is the single boundary that
turns those payloads into canonical ``GuestRecord`` objects; nothing past this
module looks at raw backend keys.

Lookup order for each detail field:
  1) details.<camelCase>
  2) <snake_case>
  3) <camelCase>
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from guest_roster.logger import get_logger
from guest_roster.models import DETAIL_FIELDS, DocumentType, GuestDetails, GuestRecord, as_progress

log = get_logger("backend_mapping")

ID_KEYS = ("guestId", "guest_id", "customer_id", "customerId", "person_id", "personId", "id")
MAIN_GUEST_KEYS = ("isMainGuest", "is_main_guest", "main_guest")
NAME_KEYS = ("full_name", "fullName", "name")
FACE_IMAGE_KEYS = ("faceImage", "faceImagePath", "face_image", "face_image_path", "face_image_base64")
DOCUMENT_IMAGE_KEYS = (
    "documentImage",
    "documentImagePath",
    "document_image",
    "document_image_path",
    "document_image_base64",
)
ROOM_KEYS = ("bookingRoomId", "booking_room_id", "bookingRoomID")

# Extra flat aliases beyond the snake/camel pair.
DETAIL_ALIASES: Dict[str, Tuple[str, ...]] = {
    "document_number": ("id_number",),
}


def _first(raw: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def extract_list(payload: Any) -> List[Any]:
    """Pull the guest list out of ``{"data": [...]}``, ``{"guests": [...]}`` or a bare list."""
    if isinstance(payload, dict):
        payload = _first(payload, ("data", "guests"))
    if isinstance(payload, list):
        return payload
    return []


def map_details(raw: Dict[str, Any]) -> GuestDetails:
    nested = raw.get("details") if isinstance(raw.get("details"), dict) else {}
    values: Dict[str, Optional[str]] = {}
    for attr, camel in DETAIL_FIELDS.items():
        keys = (attr,) + DETAIL_ALIASES.get(attr, ()) + (camel,)
        value = nested.get(camel)
        if value is None:
            value = _first(raw, keys)
        text = _text(value)
        values[attr] = text or None
    return GuestDetails(**values)


def map_backend_guest(raw: Dict[str, Any], index: int) -> GuestRecord:
    stable_id = _first(raw, ID_KEYS)
    guest_id = _text(stable_id) or str(index)

    details = map_details(raw)
    first = details.first_name or ""
    last = details.last_name or ""
    name = _text(_first(raw, NAME_KEYS)) or f"{first} {last}".strip() or f"Guest {index + 1}"

    doc_raw = _first(raw, ("documentType", "id_type"))
    document_type = DocumentType.parse(doc_raw) or DocumentType.ID_CARD

    face_image = _text(_first(raw, FACE_IMAGE_KEYS)) or None
    document_image = _text(_first(raw, DOCUMENT_IMAGE_KEYS)) or None

    progress = as_progress(raw.get("progress"))
    if progress is None:
        if face_image and document_image:
            progress = 100
        elif face_image:
            progress = 50
        else:
            progress = 0

    room = _text(_first(raw, ROOM_KEYS))

    return GuestRecord(
        id=guest_id,
        name=name,
        is_main_guest=any(raw.get(k) is True for k in MAIN_GUEST_KEYS),
        document_type=document_type,
        details=details,
        face_image=face_image,
        document_image=document_image,
        progress=progress,
        booking_room_id=room or None,
    )


def map_backend_guests(payload: Any) -> List[GuestRecord]:
    items = extract_list(payload)
    out: List[GuestRecord] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            log.warning("Skipping backend guest %d: not an object", idx)
            continue
        out.append(map_backend_guest(item, idx))
    return out
