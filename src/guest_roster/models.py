"""
Canonical guest roster data model.

Records are plain dataclasses with snake_case attributes. The persisted and
wire shape uses camelCase keys (``isMainGuest``, ``details.firstName`` ...);
``to_dict`` / ``from_dict`` convert between the two.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from guest_roster.core.exceptions import InvalidGuestRecordError


class DocumentType(str, Enum):
    ID_CARD = "Thai ID Card"
    PASSPORT = "Overseas Passport"

    @classmethod
    def parse(cls, value: Any) -> Optional["DocumentType"]:
        """Accept enum values, member names and backend aliases."""
        if value is None:
            return None
        if isinstance(value, DocumentType):
            return value
        raw = str(value).strip()
        if not raw:
            return None
        for member in cls:
            if raw == member.value or raw.upper() == member.name:
                return member
        upper = raw.upper()
        if "PASSPORT" in upper:
            return cls.PASSPORT
        if "ID" in upper:
            return cls.ID_CARD
        return None


# snake_case attribute -> camelCase wire key
DETAIL_FIELDS: Dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
    "gender": "gender",
    "nationality": "nationality",
    "date_of_birth": "dateOfBirth",
    "document_number": "documentNumber",
    "current_address": "currentAddress",
    "date_of_arrival": "dateOfArrival",
    "visa_type": "visaType",
    "stay_expiry_date": "stayExpiryDate",
    "point_of_entry": "pointOfEntry",
    "tm_card_number": "tmCardNumber",
}


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


@dataclass
class GuestDetails:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    date_of_birth: Optional[str] = None
    document_number: Optional[str] = None
    current_address: Optional[str] = None
    # passport only
    date_of_arrival: Optional[str] = None
    visa_type: Optional[str] = None
    stay_expiry_date: Optional[str] = None
    point_of_entry: Optional[str] = None
    tm_card_number: Optional[str] = None

    def present(self, attr: str) -> bool:
        return not is_blank(getattr(self, attr))

    def filled_fields(self) -> List[str]:
        return [f.name for f in fields(self) if self.present(f.name)]

    def overlay(self, other: "GuestDetails") -> "GuestDetails":
        """Field-by-field union; ``other`` wins wherever it is non-empty."""
        merged = replace(self)
        for f in fields(other):
            if other.present(f.name):
                setattr(merged, f.name, getattr(other, f.name))
        return merged

    def to_dict(self) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for attr, key in DETAIL_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, data: Any) -> "GuestDetails":
        if not isinstance(data, dict):
            return cls()
        kwargs: Dict[str, Optional[str]] = {}
        for attr, key in DETAIL_FIELDS.items():
            value = data.get(key, data.get(attr))
            kwargs[attr] = None if value is None else str(value)
        return cls(**kwargs)


@dataclass
class GuestRecord:
    """One person associated with a booking (or a booking room)."""

    id: str
    name: str = ""
    is_main_guest: Optional[bool] = None
    document_type: Optional[DocumentType] = None
    details: GuestDetails = field(default_factory=GuestDetails)
    face_image: Optional[str] = None
    document_image: Optional[str] = None
    progress: Optional[int] = None
    booking_room_id: Optional[str] = None

    def __post_init__(self) -> None:
        if is_blank(self.id):
            raise InvalidGuestRecordError("GuestRecord.id must not be empty")
        self.id = str(self.id)

    @property
    def is_main(self) -> bool:
        return self.is_main_guest is True

    def copy(self) -> "GuestRecord":
        return replace(self, details=replace(self.details))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "isMainGuest": self.is_main_guest,
            "documentType": self.document_type.value if self.document_type else None,
            "progress": self.progress,
            "details": self.details.to_dict(),
            "faceImage": self.face_image or "",
            "documentImage": self.document_image or "",
            "bookingRoomId": self.booking_room_id,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "GuestRecord":
        if not isinstance(data, dict):
            raise InvalidGuestRecordError(f"Expected a mapping, got {type(data).__name__}")

        raw_id = data.get("id")
        if is_blank(raw_id):
            raise InvalidGuestRecordError("Guest payload has no id")

        main = data.get("isMainGuest", data.get("is_main_guest"))
        progress = data.get("progress")
        room = data.get("bookingRoomId", data.get("booking_room_id"))

        return cls(
            id=str(raw_id),
            name=str(data.get("name") or ""),
            is_main_guest=main if isinstance(main, bool) else None,
            document_type=DocumentType.parse(data.get("documentType")),
            details=GuestDetails.from_dict(data.get("details")),
            face_image=data.get("faceImage") or None,
            document_image=data.get("documentImage") or None,
            progress=as_progress(progress),
            booking_room_id=None if is_blank(room) else str(room),
        )


def as_progress(value: Any) -> Optional[int]:
    """Integer progress, or None for non-numeric, NaN or infinite input."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


@dataclass(frozen=True)
class BookingKey:
    """Scope of one cached roster: a booking, optionally narrowed to a room."""

    booking_id: str
    booking_room_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "booking_id", str(self.booking_id).strip())
        room = self.booking_room_id
        object.__setattr__(self, "booking_room_id", None if is_blank(room) else str(room).strip())
        if not self.booking_id:
            raise ValueError("booking_id must not be empty")

    @property
    def storage_key(self) -> str:
        if self.booking_room_id:
            return f"guest_cache_{self.booking_id}_{self.booking_room_id}"
        return f"guest_cache_{self.booking_id}"

    def __str__(self) -> str:
        if self.booking_room_id:
            return f"{self.booking_id}:{self.booking_room_id}"
        return self.booking_id


@dataclass
class CacheEntry:
    booking_key: BookingKey
    timestamp: int
    guests: List[GuestRecord] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "__ts": self.timestamp,
            "guests": [g.to_dict() for g in self.guests],
        }
