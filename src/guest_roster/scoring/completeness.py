"""Completeness score: how much verified information a guest record carries.

Used only to break ties between records that share an identity key.
"""

from __future__ import annotations

from guest_roster.models import GuestRecord, is_blank

NAME_WEIGHT = 2
DOCUMENT_WEIGHT = 3  # outranks a name-only placeholder

SINGLE_POINT_FIELDS = (
    "date_of_birth",
    "nationality",
    "gender",
    "current_address",
    "date_of_arrival",
    "visa_type",
    "stay_expiry_date",
    "point_of_entry",
    "tm_card_number",
)


def score(record: GuestRecord) -> int:
    """Weighted count of present fields plus the caller-supplied progress."""
    details = record.details
    total = 0
    if details.present("first_name"):
        total += NAME_WEIGHT
    if details.present("last_name"):
        total += NAME_WEIGHT
    if details.present("document_number"):
        total += DOCUMENT_WEIGHT

    total += sum(1 for attr in SINGLE_POINT_FIELDS if details.present(attr))

    if not is_blank(record.face_image):
        total += 1
    if not is_blank(record.document_image):
        total += 1

    total += max(0, record.progress or 0)
    return total
