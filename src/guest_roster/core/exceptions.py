class RosterError(Exception):
    """Base exception for guest roster failures."""


class InvalidGuestRecordError(RosterError):
    """Raised when a payload cannot be decoded into a GuestRecord."""


class CacheCorruptError(RosterError):
    """Raised when a persisted roster payload is malformed."""


class CacheExpiredError(RosterError):
    """Raised when a persisted roster is older than the cache TTL."""
