"""
TTL-bounded roster cache keyed by booking (and optionally booking room).

Persisted layout, one entry per booking key::

    guest_cache_<bookingId>[_<bookingRoomId>] -> {"__ts": <epoch-ms>, "guests": [...]}

Loading never raises: a missing, corrupt or expired entry is a cache miss.
"""

from __future__ import annotations

import json
import math
import time
from typing import Any, Callable, Iterable, List, Optional

from guest_roster.core.exceptions import (
    CacheCorruptError,
    CacheExpiredError,
    InvalidGuestRecordError,
)
from guest_roster.cache.storage import KeyValueStorage
from guest_roster.logging import get_logger
from guest_roster.models import BookingKey, CacheEntry, GuestRecord

log = get_logger("cache_store")

GUEST_CACHE_TTL_MS = 24 * 60 * 60 * 1000
TIMESTAMP_FIELD = "__ts"


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class CacheStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Callable[[], int] = _epoch_ms,
    ):
        self.storage = storage
        self.clock = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def save(self, booking_key: BookingKey, guests: Iterable[GuestRecord]) -> None:
        entry = CacheEntry(
            booking_key=booking_key,
            timestamp=self.clock(),
            guests=list(guests or []),
        )
        try:
            payload = json.dumps(entry.to_payload(), ensure_ascii=False)
            self.storage.set_item(booking_key.storage_key, payload)
        except (OSError, TypeError, ValueError):
            log.warning("Cache save failed for booking %s", booking_key, exc_info=True)
            return
        log.debug("Cached %d guest(s) for booking %s", len(entry.guests), booking_key)

    def load(self, booking_key: BookingKey) -> List[GuestRecord]:
        entry = self.load_entry(booking_key)
        return entry.guests if entry else []

    def load_entry(self, booking_key: BookingKey) -> Optional[CacheEntry]:
        try:
            raw = self.storage.get_item(booking_key.storage_key)
        except OSError:
            log.warning("Cache read failed for booking %s", booking_key, exc_info=True)
            return None
        if not raw:
            return None

        try:
            return self._decode(booking_key, raw)
        except CacheExpiredError:
            log.info("Cache expired for booking %s", booking_key)
            self.clear(booking_key)
        except CacheCorruptError as exc:
            log.warning("Ignoring corrupt cache for booking %s: %s", booking_key, exc)
        return None

    def clear(self, booking_key: BookingKey) -> None:
        try:
            self.storage.remove_item(booking_key.storage_key)
        except OSError:
            log.warning("Cache clear failed for booking %s", booking_key, exc_info=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _decode(self, booking_key: BookingKey, raw: str) -> CacheEntry:
        try:
            data: Any = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as exc:
            raise CacheCorruptError(f"unparsable payload: {exc}") from exc

        if not isinstance(data, dict):
            raise CacheCorruptError("payload is not an object")

        ts = data.get(TIMESTAMP_FIELD)
        if isinstance(ts, bool) or not isinstance(ts, (int, float)) or ts <= 0:
            raise CacheCorruptError("missing or invalid timestamp")
        if isinstance(ts, float) and not math.isfinite(ts):
            raise CacheCorruptError("missing or invalid timestamp")
        if self.clock() - ts >= GUEST_CACHE_TTL_MS:
            raise CacheExpiredError(str(booking_key))

        guests = data.get("guests")
        if not isinstance(guests, list):
            raise CacheCorruptError("guests is not a list")

        try:
            records = [GuestRecord.from_dict(g) for g in guests]
        except InvalidGuestRecordError as exc:
            raise CacheCorruptError(str(exc)) from exc

        return CacheEntry(booking_key=booking_key, timestamp=int(ts), guests=records)
