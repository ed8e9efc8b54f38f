"""
Core orchestration for guest_roster: exceptions and the roster session.
"""

from guest_roster.core.exceptions import (
    CacheCorruptError,
    CacheExpiredError,
    InvalidGuestRecordError,
    RosterError,
)

__all__ = [
    "CacheCorruptError",
    "CacheExpiredError",
    "InvalidGuestRecordError",
    "RosterError",
]
