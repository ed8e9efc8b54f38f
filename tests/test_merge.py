# tests/test_merge.py

from __future__ import annotations

from conftest import make_guest
from guest_roster.identity.resolver import resolve
from guest_roster.models import DocumentType
from guest_roster.reconcile.merge import merge


def _backend():
    return [
        make_guest("101", name="Somchai Jaidee", main=True, progress=50, document_number="1100", nationality="TH"),
        make_guest("102", name="Anna Smith", main=False, progress=0, first_name="Anna", last_name="Smith",
                   date_of_birth="1991-02-03"),
    ]


def test_cache_value_wins_for_same_identity() -> None:
    backend = [make_guest("1", name="John", document_number="P1")]
    cache = [make_guest("c1", name="Johnny", document_number="P1")]

    out = merge(backend, cache)

    assert len(out) == 1
    assert out[0].name == "Johnny"
    # backend id is the durable one
    assert out[0].id == "1"


def test_no_information_loss_on_collision() -> None:
    backend = [make_guest("1", name="Jane", document_number="P1", nationality="TH", face="face-url")]
    cache = [make_guest("c1", name="", document_number="P1", first_name="Jane", nationality="", face="")]

    merged = merge(backend, cache)[0]

    assert merged.details.nationality == "TH"
    assert merged.details.first_name == "Jane"
    assert merged.details.document_number == "P1"
    assert merged.face_image == "face-url"
    assert merged.name == "Jane"


def test_novel_cache_identity_surfaces() -> None:
    cache = [make_guest("local-1", document_number="X1", first_name="A")]

    out = merge([], cache)

    assert len(out) == 1
    assert resolve(out[0]).token == "DOC:x1"
    assert out[0].id == "local-1"


def test_backend_only_guests_are_kept() -> None:
    out = merge(_backend(), [])
    assert [g.id for g in out] == ["101", "102"]


def test_idempotent_when_remerged_with_nothing() -> None:
    cache = [
        make_guest("c1", name="Anna Smith", first_name="Anna", last_name="Smith", date_of_birth="1991-02-03",
                   gender="F", progress=40),
        make_guest("local-9", name="Guest 3", main=False, progress=0),
    ]
    once = merge(_backend(), cache)
    assert merge(once, []) == once


def test_main_guest_sorted_first_and_order_otherwise_stable() -> None:
    backend = [
        make_guest("1", name="A"),
        make_guest("2", name="B", main=True),
        make_guest("3", name="C"),
    ]
    out = merge(backend, [])
    assert [g.id for g in out] == ["2", "1", "3"]


def test_main_flag_only_overridden_by_explicit_cache_bool() -> None:
    backend = [make_guest("1", name="A", main=True), make_guest("2", name="B", main=True)]
    cache = [make_guest("c1", name="A", main=None), make_guest("c2", name="B", main=False)]

    out = {g.id: g for g in merge(backend, cache)}

    assert out["1"].is_main_guest is True
    assert out["2"].is_main_guest is False


def test_merge_never_invents_a_main_guest() -> None:
    backend = [make_guest("1", name="A"), make_guest("2", name="B")]
    cache = [make_guest("c1", name="A", progress=10)]
    assert not any(g.is_main for g in merge(backend, cache))


def test_progress_and_document_type_overlay() -> None:
    backend = [make_guest("1", name="A", progress=50)]
    backend[0].document_type = DocumentType.ID_CARD
    cache = [make_guest("c1", name="A", progress=0)]
    cache[0].document_type = DocumentType.PASSPORT

    merged = merge(backend, cache)[0]

    assert merged.progress == 0
    assert merged.document_type is DocumentType.PASSPORT


def test_invalid_inputs_degrade_to_empty() -> None:
    assert merge(None, None) == []
    assert merge("not a list", {"guests": []}) == []
    assert [g.id for g in merge(None, [make_guest("c1", name="A")])] == ["c1"]


def test_dict_items_are_coerced_and_bad_items_skipped() -> None:
    cache = [
        {"id": "c1", "name": "Dict Guest", "isMainGuest": False, "details": {"documentNumber": "D9"}},
        {"name": "no id"},
        42,
    ]
    out = merge([], cache)
    assert len(out) == 1
    assert out[0].details.document_number == "D9"


def test_inputs_are_not_mutated() -> None:
    backend = [make_guest("1", name="A", document_number="P1")]
    cache = [make_guest("c1", name="A2", document_number="P1", gender="M")]

    out = merge(backend, cache)
    out[0].details.nationality = "XX"

    assert backend[0].name == "A"
    assert backend[0].details.gender is None
    assert backend[0].details.nationality is None
    assert cache[0].details.nationality is None


def test_non_finite_progress_in_dict_input_is_dropped() -> None:
    out = merge([], [{"id": "c", "name": "A", "progress": float("nan")}])

    assert len(out) == 1
    assert out[0].progress is None


def test_overlay_that_strengthens_identity_folds_into_existing_guest() -> None:
    backend = [
        make_guest("a", name="J", date_of_birth="1990"),
        make_guest("b", name="Other", first_name="Jane", date_of_birth="1990"),
    ]
    cache = [make_guest("c", name="J", first_name="Jane")]

    once = merge(backend, cache)
    keys = [resolve(g).token for g in once]

    assert len(once) == 1
    assert len(set(keys)) == len(keys)
    assert once[0].id == "b"
    assert keys == ["NDO:jane||1990"]
    assert merge(once, []) == once


def test_merged_id_is_backend_id_and_cache_only_keeps_local_id() -> None:
    backend = [make_guest("srv-7", name="Mali", document_number="X9")]
    cache = [
        make_guest("local-1", name="Mali K", document_number="X9"),
        make_guest("local-2", name="Walk In"),
    ]

    ids = {g.name: g.id for g in merge(backend, cache)}

    assert ids == {"Mali K": "srv-7", "Walk In": "local-2"}
