"""
Deduplicate a single roster for display.

One list can hold the same person several times (repeated partial updates,
a backend returning two shapes of one guest). Records are bucketed by
identity key; a name-alias index sends a record into the bucket its display
name was first seen in, so "Guest 1" and a later document-bearing "Guest 1"
collapse into one entry. The first occurrence of a name decides the bucket
for the rest of the pass.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from guest_roster.identity.resolver import display_name_key, resolve
from guest_roster.logging import get_logger
from guest_roster.models import GuestRecord
from guest_roster.reconcile._inputs import coerce_roster, main_guest_first
from guest_roster.scoring.completeness import score

log = get_logger("display")


def _tiebreak(record: GuestRecord) -> Tuple[str, str]:
    return record.id, json.dumps(record.to_dict(), sort_keys=True, default=str)


def choose_better(prev: GuestRecord, cur: GuestRecord) -> GuestRecord:
    """Main guest first, then completeness, then a stable tie-break."""
    if cur.is_main != prev.is_main:
        return cur if cur.is_main else prev

    prev_score, cur_score = score(prev), score(cur)
    if cur_score != prev_score:
        return cur if cur_score > prev_score else prev

    return cur if _tiebreak(cur) < _tiebreak(prev) else prev


def normalize(records: Any) -> List[GuestRecord]:
    roster = coerce_roster(records, "display")

    buckets: Dict[str, GuestRecord] = {}
    name_index: Dict[str, str] = {}
    collapsed = 0

    for record in roster:
        primary_key = resolve(record).token
        name_key = display_name_key(record)
        final_key = name_index.get(name_key, primary_key) if name_key else primary_key

        prev = buckets.get(final_key)
        if prev is None:
            buckets[final_key] = record
        else:
            collapsed += 1
            buckets[final_key] = choose_better(prev, record)

        if name_key:
            name_index[name_key] = final_key

    if collapsed:
        log.debug("Collapsed %d duplicate guest record(s)", collapsed)
    return main_guest_first(list(buckets.values()))
