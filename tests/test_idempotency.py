# tests/test_idempotency.py

from __future__ import annotations

from conftest import make_guest
from guest_roster.cache.storage import MemoryStorage
from guest_roster.identity.idempotency import CreationLedger, creation_key


def test_key_follows_identity_resolution() -> None:
    a = make_guest("local-1", name="Jane", document_number="AB1")
    b = make_guest("77", name="Jane D.", document_number=" ab1 ")
    assert creation_key(5, a) == creation_key(5, b) == "created_guest:5:DOC:ab1"


def test_mark_and_check() -> None:
    ledger = CreationLedger(5)
    guest = make_guest("local-1", name="Jane")

    assert not ledger.was_created(guest)
    ledger.mark_created(guest)
    assert ledger.was_created(guest)
    assert len(ledger) == 1
    assert ledger.pending([guest, make_guest("local-2", name="Other")])[0].id == "local-2"


def test_ledger_persists_through_storage() -> None:
    storage = MemoryStorage()
    CreationLedger(5, storage).mark_created(make_guest("g", name="Jane"))

    reloaded = CreationLedger(5, storage)

    assert "created_guest:5:NAME:jane" in reloaded
    assert len(CreationLedger(6, storage)) == 0


def test_corrupt_ledger_loads_empty() -> None:
    storage = MemoryStorage({"created_guests_5": "{oops"})
    assert len(CreationLedger(5, storage)) == 0
