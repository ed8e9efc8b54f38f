from __future__ import annotations

from typing import Any, Iterable, List, Optional

from guest_roster.cache.store import CacheStore
from guest_roster.logging import get_logger
from guest_roster.models import BookingKey, GuestDetails, GuestRecord
from guest_roster.reconcile import roster_ops
from guest_roster.reconcile._inputs import main_guest_first
from guest_roster.reconcile.display import normalize
from guest_roster.reconcile.merge import merge


class RosterSession:
    """
    In-memory roster for one booking key.
    Reconciles backend data with the cache and persists every local edit.
    """

    def __init__(
        self,
        store: CacheStore,
        booking_key: BookingKey,
        guests: Optional[Iterable[GuestRecord]] = None,
    ):
        self.store = store
        self.booking_key = booking_key
        self.guests: List[GuestRecord] = list(guests or [])
        self.log = get_logger("session")

    def reconcile(self, backend: Any, persist: bool = False) -> List[GuestRecord]:
        """Overlay the cached roster on ``backend`` and normalize the result.

        ``backend`` must be the complete fetched roster.
        """
        cached = self.store.load(self.booking_key)
        self.guests = normalize(merge(backend, cached))
        self.log.info(
            "Reconciled booking %s: %d guest(s), %d from cache",
            self.booking_key,
            len(self.guests),
            len(cached),
        )
        if persist:
            self._persist()
        return self.guests

    def restore(self) -> List[GuestRecord]:
        """Show the cached roster alone (no backend available yet)."""
        self.guests = normalize(self.store.load(self.booking_key))
        return self.guests

    # ------------------------------------------------------------------
    # Edits (each one is saved immediately)
    # ------------------------------------------------------------------
    def update_details(self, guest_id: str, details: GuestDetails) -> List[GuestRecord]:
        return self._apply(roster_ops.update_details(self.guests, guest_id, details))

    def capture_face(self, guest_id: str, image: str) -> List[GuestRecord]:
        return self._apply(roster_ops.apply_face_capture(self.guests, guest_id, image))

    def capture_document(
        self,
        guest_id: str,
        image: str,
        extracted: Optional[GuestDetails] = None,
    ) -> List[GuestRecord]:
        return self._apply(roster_ops.apply_document_capture(self.guests, guest_id, image, extracted))

    def add_guest(self, max_guests: Optional[int] = None) -> List[GuestRecord]:
        return self._apply(
            roster_ops.add_guest(self.guests, self.booking_key.booking_room_id, max_guests)
        )

    def delete_selected(self, selected_ids: Iterable[str]) -> List[GuestRecord]:
        return self._apply(roster_ops.delete_selected(self.guests, selected_ids))

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def display(self, read_only: bool = False, main_guest_name: Optional[str] = None) -> List[GuestRecord]:
        view = normalize(self.guests)
        if not read_only:
            return view
        view = roster_ops.filter_by_room(view, self.booking_key.booking_room_id)
        return main_guest_first(roster_ops.align_main_guest(view, main_guest_name))

    def _apply(self, guests: List[GuestRecord]) -> List[GuestRecord]:
        self.guests = guests
        self._persist()
        return self.guests

    def _persist(self) -> None:
        self.store.save(self.booking_key, self.guests)
