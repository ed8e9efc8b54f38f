
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from guest_roster.cli.utils import booking_key, console, open_store, read_json, roster_table, write_json
from guest_roster.core.session import RosterSession
from guest_roster.normalization.backend import map_backend_guests


def reconcile_command(
    backend: Path = typer.Argument(..., exists=True, readable=True, help="Backend guest payload (JSON)"),
    booking_id: str = typer.Option(..., "--booking-id", "-b"),
    room_id: Optional[str] = typer.Option(None, "--room-id", "-r"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir"),
    save: bool = typer.Option(False, "--save", help="Write the reconciled roster back to the cache"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    out: Optional[Path] = typer.Option(None, "--out", "-o"),
):
    """
    Merge a backend roster with the cached roster and show the result.
    """
    key = booking_key(booking_id, room_id)
    session = RosterSession(open_store(cache_dir), key)
    guests = session.reconcile(map_backend_guests(read_json(backend)), persist=save)

    if as_json or out:
        write_json(guests, out=out, pretty=True)
        return
    console.print(roster_table(f"Booking {key}", guests))
